PRERENDER_URL = 'http://127.0.0.1:3000/'
# PRERENDER_URL = 'https://service.prerender.io'
# PRERENDER_TOKEN = 'your-prerender-token'

PRERENDER_WHITELIST = []
PRERENDER_BLACKLIST = ['/admin/*', '*.js', '*.css']

PRERENDER_SOFT_HTTP_CODES = False
PRERENDER_DEBUG = True
PRERENDER_TIMEOUT = 10
