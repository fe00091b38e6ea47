import random

from bs4 import BeautifulSoup

from utils.data import PROJECTS, SKILLS, EDUCATION, PROFILE, SOCIAL
from utils.effects import CONFETTI_PALETTE, generate_confetti


EXPECTED_PROJECTS = [
    ('CodeReview', 'Enhanced Code quality through AI - driven Suggestions.'),
    ('Instagram Clone', 'A clone with post, like, comment & auth features.'),
    ('ERA Montage', 'Memory sharing website for MMMUT students.'),
    ('Gemini Clone', 'Google Gemini AI UI clone with conversation features.'),
    ('Hostel Food Waste Reduction App', 'Pre-book meals to reduce hostel food wastage. (In progress)'),
    ('StartUpNest', 'Co-living finder for startup folks in Bangalore. (In progress)'),
]


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_project_cards_in_literal_order(page):
    cards = page.select('.project-card')
    assert len(cards) == 6
    rendered = [
        (card.select_one('.project-card__title').get_text(),
         card.select_one('.project-card__description').get_text())
        for card in cards
    ]
    assert rendered == EXPECTED_PROJECTS
    assert [(p.title, p.description) for p in PROJECTS] == EXPECTED_PROJECTS


def test_project_images_and_links(page):
    cards = page.select('.project-card')
    for card, project in zip(cards, PROJECTS):
        assert card.select_one('img')['src'] == project.image
        link = card.select_one('.project-card__link')
        if project.link:
            assert link['href'] == project.link
            assert link['target'] == '_blank'
        else:
            assert link is None


def test_skills_and_education(page):
    assert [s.get_text() for s in page.select('.skill')] == list(SKILLS)
    entries = page.select('.education__entry')
    assert [e.get_text() for e in entries] == list(EDUCATION)


def test_hero_and_navigation(page):
    assert page.select_one('.navbar__title').get_text() == PROFILE['name']
    assert page.select_one('.hero__headline').get_text() == PROFILE['headline']
    assert page.select_one('.hero__photo')['src'] == PROFILE['photo']
    hrefs = {a['href'] for a in page.select('a')}
    assert f"mailto:{PROFILE['email']}" in hrefs
    assert PROFILE['resume'] in hrefs
    assert set(SOCIAL.values()) <= hrefs


def parse_style(piece):
    """Inline style of a confetti piece as a dict"""
    declarations = (d.split(':', 1) for d in piece['style'].split(';') if d.strip())
    return {name.strip(): value.strip() for name, value in declarations}


def assert_piece_in_range(piece):
    style = parse_style(piece)
    assert 2 <= float(piece['data-size']) < 32
    assert 3 <= float(piece['data-duration']) < 5
    assert 0 <= float(style['left'].rstrip('%')) < 300
    assert style['background-color'] in CONFETTI_PALETTE


def test_confetti_rendered(page):
    pieces = page.select('.confetti-layer .confetti')
    assert len(pieces) == 30
    for piece in pieces:
        assert_piece_in_range(piece)
    assert [p['data-index'] for p in pieces] == [str(i) for i in range(30)]


def test_each_render_generates_new_confetti(client):
    def styles():
        soup = BeautifulSoup(client.get('/').get_data(as_text=True), 'html.parser')
        return [p['style'] for p in soup.select('.confetti')]

    assert styles() != styles()


def test_scroll_thresholds_rendered(page):
    body = page.body
    assert body['data-show-threshold'] == '300'
    assert body['data-hide-threshold'] == '100'
    assert body['data-fade-duration'] == '0.5'
    assert not body.has_attr('data-scroll-state')
    assert page.select_one('#navbar')['data-scroll-state'] == 'hidden'
    assert page.select_one('#content')['data-scroll-state'] == 'hidden'


def test_contact_form_has_no_target(page):
    form = page.select_one('#contact-form')
    assert form is not None
    assert not form.has_attr('action')
    assert not form.has_attr('method')
    assert {field['name'] for field in form.select('input, textarea')} == {'name', 'email', 'message'}
    assert form.select_one('button[type=submit]') is not None


def test_contact_submit_is_not_handled(client):
    response = client.post('/', data={'name': 'a', 'email': 'a@b.c', 'message': 'hi'})
    assert response.status_code == 405


def test_page_assets_linked(page):
    assert page.select_one('link[href="/static/css/portfolio.css"]') is not None
    assert page.select_one('script[src="/static/js/portfolio.js"]') is not None
    assert 'page-pages-index' in page.body['class']


def test_security_headers(client):
    response = client.get('/')
    csp = response.headers['Content-Security-Policy']
    assert "connect-src 'none'" in csp
    assert "form-action 'none'" in csp
    assert response.headers['X-Content-Type-Options'] == 'nosniff'


def test_meta_and_footer(app, page):
    assert page.title.get_text() == app.config['SITE_TITLE']
    assert 'All rights reserved.' in page.select_one('.contact__copyright').get_text()


def test_unknown_path_returns_404(client):
    response = client.get('/no-such-page')
    assert response.status_code == 404
    assert '404' in response.get_data(as_text=True)


class MaxRandom(random.Random):
    """Random source pinned just below the top of every range"""

    def random(self):
        return 0.99999


def test_confetti_at_range_edge_stays_in_range(client, monkeypatch):
    monkeypatch.setattr(
        'blueprints.pages.routes.generate_confetti',
        lambda: generate_confetti(rng=MaxRandom()),
    )
    soup = BeautifulSoup(client.get('/').get_data(as_text=True), 'html.parser')
    pieces = soup.select('.confetti')
    assert len(pieces) == 30
    for piece in pieces:
        assert_piece_in_range(piece)


def test_confetti_outside_latched_elements(page):
    layer = page.select_one('.confetti-layer')
    assert layer is not None
    assert all(not parent.has_attr('data-scroll-state') for parent in layer.parents)
    assert page.select('[data-scroll-state] .confetti') == []


def test_error_page_is_styled(client):
    response = client.get('/no-such-page')
    soup = BeautifulSoup(response.get_data(as_text=True), 'html.parser')
    assert soup.select_one('link[href="/static/css/portfolio.css"]') is not None
    assert soup.select_one('.error-page') is not None


def test_page_script_resubscribes_after_restore(client):
    response = client.get('/static/js/portfolio.js')
    script = response.get_data(as_text=True)
    response.close()
    assert response.status_code == 200
    assert "addEventListener('pagehide', unsubscribe)" in script
    assert "addEventListener('pageshow'" in script
    assert 'if (event.persisted) subscribe();' in script
