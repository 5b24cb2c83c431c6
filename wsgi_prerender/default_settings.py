"""
Default wsgi-prerender settings. Override them by passing values to
``wsgi_prerender.config.get_settings`` or with PRERENDER_* environment
variables.
"""

PRERENDER_URL = 'https://service.prerender.io'

PRERENDER_TOKEN = None

PRERENDER_CRAWLER_USER_AGENTS = [
    'googlebot',
    'yahoo',
    'bingbot',
    'yandex',
    'baiduspider',
    'facebookexternalhit',
    'twitterbot',
    'rogerbot',
    'linkedinbot',
    'embedly',
    'quora link preview',
    'showyoubot',
    'outbrain',
    'pinterest',
    'developers.google.com/+/web/snippet',
    'slackbot',
    'vkshare',
    'w3c_validator',
    'redditbot',
    'applebot',
    'whatsapp',
    'flipboard',
    'tumblr',
    'bitlybot',
    'skypeuripreview',
    'nuzzel',
    'discordbot',
    'google page speed',
    'qwantify',
    'chrome-lighthouse',
    'telegrambot',
]

PRERENDER_WHITELIST = []

# static assets are never prerendered
PRERENDER_BLACKLIST = [
    '*.js',
    '*.css',
    '*.xml',
    '*.less',
    '*.png',
    '*.jpg',
    '*.jpeg',
    '*.svg',
    '*.gif',
    '*.pdf',
    '*.doc',
    '*.txt',
    '*.ico',
    '*.rss',
    '*.zip',
    '*.mp3',
    '*.rar',
    '*.exe',
    '*.wmv',
    '*.avi',
    '*.ppt',
    '*.mpg',
    '*.mpeg',
    '*.tif',
    '*.wav',
    '*.mov',
    '*.psd',
    '*.ai',
    '*.xls',
    '*.mp4',
    '*.m4a',
    '*.swf',
    '*.dat',
    '*.dmg',
    '*.iso',
    '*.flv',
    '*.m4v',
    '*.torrent',
    '*.eot',
    '*.ttf',
    '*.otf',
    '*.woff',
    '*.woff2',
]

PRERENDER_SOFT_HTTP_CODES = True

PRERENDER_DEBUG = False

PRERENDER_TIMEOUT = 30.0
