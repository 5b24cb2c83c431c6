class Outcome(object):
    """
    What PrerenderMiddleware decided to do with a request.

    * PASS_THROUGH - hand the request to the wrapped application;
    * REDIRECT - redirect to ``location`` with ``status``;
    * RESPOND - return the prerendered ``response``;
    * TERMINATE - stop with an empty ``status`` (404) response;
    * PROPAGATE - raise ``error`` (debug mode only).
    """
    PASS_THROUGH = 'pass_through'
    REDIRECT = 'redirect'
    RESPOND = 'respond'
    TERMINATE = 'terminate'
    PROPAGATE = 'propagate'

    _known = {PASS_THROUGH, REDIRECT, RESPOND, TERMINATE, PROPAGATE}

    def __init__(self, kind, response=None, location=None, status=None,
                 error=None):
        if kind not in self._known:
            raise ValueError("Unknown outcome: %r" % kind)
        self.kind = kind
        self.response = response
        self.location = location
        self.status = status
        self.error = error

    @classmethod
    def pass_through(cls):
        return cls(cls.PASS_THROUGH)

    @classmethod
    def redirect(cls, location, status):
        return cls(cls.REDIRECT, location=location, status=status)

    @classmethod
    def respond(cls, response):
        return cls(cls.RESPOND, response=response, status=response.status)

    @classmethod
    def terminate(cls, status=404):
        return cls(cls.TERMINATE, status=status)

    @classmethod
    def propagate(cls, error):
        return cls(cls.PROPAGATE, error=error)

    def __repr__(self):
        if self.kind == self.REDIRECT:
            return "<Outcome %s %d %s>" % (self.kind, self.status, self.location)
        if self.kind == self.PROPAGATE:
            return "<Outcome %s %r>" % (self.kind, self.error)
        if self.status is not None:
            return "<Outcome %s %d>" % (self.kind, self.status)
        return "<Outcome %s>" % self.kind
