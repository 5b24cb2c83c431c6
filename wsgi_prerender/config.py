import os
from collections import namedtuple

from scrapy.settings import BaseSettings

from wsgi_prerender.exceptions import ConfigurationError


def get_settings(values=None, environ=None):
    """
    Return a frozen settings object with wsgi-prerender defaults,
    PRERENDER_* variables from ``environ`` (``os.environ`` by default)
    and explicit ``values`` applied on top, in that order.
    """
    if environ is None:
        environ = os.environ

    settings = BaseSettings()
    settings.setmodule('wsgi_prerender.default_settings', priority='default')
    for name in list(settings):
        if name in environ:
            settings.set(name, environ[name], priority='command')
    if values:
        settings.update(values, priority='project')
    return settings.frozencopy()


def _getlist(settings, name):
    return tuple(v.strip() for v in settings.getlist(name) if v and v.strip())


def _getbool(settings, name):
    try:
        return settings.getbool(name)
    except ValueError:
        raise ConfigurationError("Incorrect %s: %r" % (name, settings.get(name)))


class PrerenderConfig(namedtuple('PrerenderConfig', [
        'url', 'token', 'crawler_user_agents', 'whitelist', 'blacklist',
        'soft_http_codes', 'debug', 'timeout'])):
    """
    Immutable wsgi-prerender configuration. Build it once with
    :meth:`from_settings` and share it between requests.
    """

    @classmethod
    def from_settings(cls, settings=None):
        if not isinstance(settings, BaseSettings):
            settings = get_settings(settings)

        url = (settings.get('PRERENDER_URL') or '').strip()
        if not url:
            raise ConfigurationError("PRERENDER_URL is not set")

        try:
            timeout = settings.getfloat('PRERENDER_TIMEOUT')
        except (TypeError, ValueError):
            raise ConfigurationError(
                "Incorrect PRERENDER_TIMEOUT: %r" % settings.get('PRERENDER_TIMEOUT'))
        if timeout <= 0:
            raise ConfigurationError("PRERENDER_TIMEOUT must be positive, got %r" % timeout)

        agents = _getlist(settings, 'PRERENDER_CRAWLER_USER_AGENTS')
        return cls(
            url=url.rstrip('/'),
            token=settings.get('PRERENDER_TOKEN') or None,
            crawler_user_agents=tuple(agent.lower() for agent in agents),
            whitelist=_getlist(settings, 'PRERENDER_WHITELIST'),
            blacklist=_getlist(settings, 'PRERENDER_BLACKLIST'),
            soft_http_codes=_getbool(settings, 'PRERENDER_SOFT_HTTP_CODES'),
            debug=_getbool(settings, 'PRERENDER_DEBUG'),
            timeout=timeout,
        )
