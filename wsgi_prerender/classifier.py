import logging

from wsgi_prerender.matching import is_listed


logger = logging.getLogger(__name__)

ESCAPED_FRAGMENT = '_escaped_fragment_'


def is_crawler(request, config):
    """
    Return True if the request comes from a crawler: it has an
    _escaped_fragment_ query argument, its User-Agent contains one of
    PRERENDER_CRAWLER_USER_AGENTS or it is sent by Buffer's bot.
    """
    if ESCAPED_FRAGMENT in request.query:
        return True

    user_agent = (request.user_agent or '').lower()
    if any(agent in user_agent for agent in config.crawler_user_agents):
        return True

    return bool(request.bufferbot)


def should_prerender(request, config):
    """ Return True if a prerendered page should be served for the request """
    if not request.user_agent:
        return False

    if request.method != 'GET':
        return False

    if not is_crawler(request, config):
        return False

    request_uri = request.request_uri

    # only check whitelist if it is not empty
    if config.whitelist and not is_listed(request_uri, config.whitelist):
        logger.debug("%(request)s is not whitelisted", {'request': request})
        return False

    # only check blacklist if it is not empty
    if config.blacklist:
        uris = [request_uri]
        # we also check for a blacklisted referer
        if request.referer:
            uris.append(request.referer)
        if is_listed(uris, config.blacklist):
            logger.debug("%(request)s is blacklisted", {'request': request})
            return False

    return True
