def test_obtain_token_and_use_for_inbox_capture(client):
    r = client.post('/auth/token', json={'email': 'user1@example.com'})
    assert r.status_code == 200, r.text
    token = r.json()['access_token']
    user_id = r.json()['user_id']
    r2 = client.post('/rpc/createInboxItem', json={'content': 'Auth item', 'tag': 'Work'},
                     headers={'Authorization': f'Bearer {token}'})
    assert r2.status_code == 200, r2.text
    assert r2.json()['user_id'] == user_id


def test_same_email_gets_same_identity(client):
    first = client.post('/auth/token', json={'email': 'same@example.com'}).json()
    second = client.post('/auth/token', json={'email': 'same@example.com'}).json()
    assert first['user_id'] == second['user_id']


def test_invalid_token_rejected(client):
    r = client.get('/rpc/getInboxItems', headers={'Authorization': 'Bearer not-a-jwt'})
    assert r.status_code == 401
    assert r.json()['detail']['code'] == 'INVALID_TOKEN'


def test_without_identity_falls_back_to_demo_user(client):
    r = client.post('/rpc/createInboxItem', json={'content': 'Legacy item', 'tag': 'Idea'})
    assert r.status_code == 200
    assert r.json()['user_id'] == 'demo-user'
