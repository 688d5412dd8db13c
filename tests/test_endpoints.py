from datetime import timedelta

from blog.errors import StoreError
from blog.models import Post
from blog.services.base import utcnow


def test_public_pages(client):
    for path in ('/', '/about', '/contact', '/login', '/register'):
        r = client.get(path)
        assert r.status_code == 200, path
    assert 'Welcome to the ALTech blog!' in client.get('/').get_data(as_text=True)


def test_unauthenticated_redirects(client):
    for path in ('/compose', '/admin', '/posts/1/edit'):
        r = client.get(path)
        assert r.status_code == 302, path
        assert '/login' in r.headers['Location']

    r = client.post('/posts/1/delete')
    assert r.status_code == 302
    assert '/login' in r.headers['Location']


def test_register_via_form_then_login(client, services):
    r = client.post('/register', data={'email': 'u1@x.com', 'password': 'pw1'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/login')

    r = client.post('/login', data={'email': 'u1@x.com', 'password': 'pw1'})
    assert r.status_code == 302
    cookie = client.get_cookie('blog_session')
    assert cookie is not None
    assert services.auth.resolve_session(cookie.value).email == 'u1@x.com'


def test_register_duplicate_and_empty_redirect_back(client, make_user):
    make_user('u1@x.com')
    r = client.post('/register', data={'email': 'u1@x.com', 'password': 'again'})
    assert r.headers['Location'].endswith('/register')

    r = client.post('/register', data={'email': '', 'password': ''})
    assert r.headers['Location'].endswith('/register')


def test_bad_login_redirects_to_login(client, make_user):
    make_user('u1@x.com', 'pw1')
    r = client.post('/login', data={'email': 'u1@x.com', 'password': 'wrong'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/login')
    assert client.get_cookie('blog_session') is None


def test_login_follows_local_next_only(client, make_user, login):
    make_user('u1@x.com')
    r = client.post('/login?next=/compose', data={'email': 'u1@x.com', 'password': 'pw'})
    assert r.headers['Location'].endswith('/compose')

    client.get('/logout')
    r = client.post('/login?next=https://evil.example/', data={'email': 'u1@x.com', 'password': 'pw'})
    assert 'evil.example' not in r.headers['Location']


def test_logout_ends_session(client, make_user, login, logout):
    make_user('u1@x.com')
    login('u1@x.com')
    assert client.get('/compose').status_code == 200

    logout()
    assert client.get('/compose').status_code == 302


def test_admin_access_control(client, make_user, login, logout):
    make_user('normal@x.com')
    make_user('boss@x.com', is_admin=True)

    login('normal@x.com')
    r = client.get('/admin')
    assert r.status_code == 302
    assert '/login' in r.headers['Location']

    logout()
    login('boss@x.com')
    r = client.get('/admin')
    assert r.status_code == 200
    assert 'Admin Dashboard' in r.get_data(as_text=True)


def test_admin_flag_on_register_form(client, app):
    client.post('/register', data={'email': 'boss@x.com', 'password': 'pw', 'is_admin': 'true'})
    client.post('/login', data={'email': 'boss@x.com', 'password': 'pw'})
    assert client.get('/admin').status_code == 200


def test_admin_flag_ignored_when_disabled(client, app):
    app.config['ALLOW_ADMIN_REGISTRATION'] = False
    client.post('/register', data={'email': 'sneaky@x.com', 'password': 'pw', 'is_admin': 'true'})
    client.post('/login', data={'email': 'sneaky@x.com', 'password': 'pw'})
    assert client.get('/admin').status_code == 302


def test_compose_edit_and_ownership_scenario(client, services, login, logout):
    u1 = services.auth.register('u1@x.com', 'pw1')
    u1_id = u1.id

    login('u1@x.com', 'pw1')
    r = client.post('/compose', data={'post_title': 'T', 'post_body': 'C'})
    assert r.status_code == 302

    post = Post.query.filter_by(title='T').one()
    post_id = post.id
    assert post.author_id == u1_id
    assert 'T' in client.get('/').get_data(as_text=True)

    logout()
    services.auth.register('u2@x.com', 'pw2')
    login('u2@x.com', 'pw2')

    r = client.get(f'/posts/{post_id}/edit')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/')

    r = client.post(f'/posts/{post_id}/edit', data={'post_title': 'Hacked', 'post_body': 'X'})
    assert r.status_code == 302
    r = client.post(f'/posts/{post_id}/delete')
    assert r.status_code == 302

    post = services.posts.get(post_id)
    assert (post.title, post.content) == ('T', 'C')

    logout()
    login('u1@x.com', 'pw1')
    assert client.get(f'/posts/{post_id}/edit').status_code == 200
    client.post(f'/posts/{post_id}/edit', data={'post_title': 'T2', 'post_body': 'C2'})
    post = services.posts.get(post_id)
    assert (post.title, post.content) == ('T2', 'C2')

    client.post(f'/posts/{post_id}/delete')
    assert Post.query.filter_by(id=post_id).first() is None


def test_missing_post_and_foreign_post_look_the_same(client, services, login):
    author = services.auth.register('a@x.com', 'pw')
    foreign = services.posts.create('Theirs', 'Body', author_id=author.id)
    foreign_id = foreign.id
    services.auth.register('b@x.com', 'pw')
    login('b@x.com')

    missing = client.post('/posts/9999/delete')
    not_owned = client.post(f'/posts/{foreign_id}/delete')
    assert missing.status_code == not_owned.status_code == 302
    assert missing.headers['Location'] == not_owned.headers['Location']


def test_show_post(client, services):
    author = services.auth.register('a@x.com', 'pw')
    post = services.posts.create('Hello', 'World', author_id=author.id)
    r = client.get(f'/posts/{post.id}')
    assert r.status_code == 200
    assert 'World' in r.get_data(as_text=True)
    assert client.get('/posts/9999').status_code == 404


def test_compose_rejects_empty_post(client, make_user, login):
    make_user('u1@x.com')
    login('u1@x.com')
    r = client.post('/compose', data={'post_title': '', 'post_body': 'C'})
    assert r.headers['Location'].endswith('/compose')
    assert Post.query.count() == 0


def test_failed_write_does_not_claim_success(client, make_user, login, monkeypatch):
    make_user('u1@x.com')
    login('u1@x.com')

    def broken(*args, **kwargs):
        raise StoreError('disk full')

    monkeypatch.setattr('blog.services.posts.PostStore.create', broken)
    r = client.post('/compose', data={'post_title': 'T', 'post_body': 'C'}, follow_redirects=True)
    assert 'Could not save your post' in r.get_data(as_text=True)


def test_failed_read_is_a_server_error(client, monkeypatch):
    def broken(*args, **kwargs):
        raise StoreError('database is down')

    monkeypatch.setattr('blog.services.posts.PostStore.list_all', broken)
    r = client.get('/')
    assert r.status_code == 500
    assert 'Something went wrong' in r.get_data(as_text=True)


def test_expired_cookie_is_anonymous(client, services, make_user, login, monkeypatch):
    make_user('u1@x.com')
    login('u1@x.com')
    assert client.get('/compose').status_code == 200

    later = utcnow() + timedelta(hours=1, seconds=1)
    monkeypatch.setattr(services.sessions, '_clock', lambda: later)
    r = client.get('/compose')
    assert r.status_code == 302
    assert '/login' in r.headers['Location']
