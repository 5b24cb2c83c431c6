import pytest

from wsgi_prerender import PrerenderConfig, get_settings


@pytest.fixture()
def settings(request):
    """ Default wsgi-prerender settings used in tests """
    return dict(
        PRERENDER_URL='http://prerender.test:3000',
        PRERENDER_TOKEN=None,
        PRERENDER_CRAWLER_USER_AGENTS=['Googlebot', 'bingbot', 'Slackbot'],
        PRERENDER_WHITELIST=[],
        PRERENDER_BLACKLIST=[],
        PRERENDER_SOFT_HTTP_CODES=False,
        PRERENDER_DEBUG=False,
    )


@pytest.fixture()
def make_config(settings):
    def _make_config(**overrides):
        values = dict(settings, **overrides)
        return PrerenderConfig.from_settings(get_settings(values, environ={}))
    return _make_config


@pytest.fixture()
def config(make_config):
    return make_config()
