import os

# -------- Config root --------
CONFIG_DIR = os.getenv("PROJECT_CONFIG_DIR", "config")
TEMPLATE_BLOG = "template-blog.json"
TEMPLATE_REPO = "template-repo.json"
COLLECTION_BLOGS = "blogs"
COLLECTION_REPOS = "repos"
AUTHORS_DIR = "authors"

# -------- GitHub --------
GITHUB_API = os.getenv("GITHUB_API", "https://api.github.com")
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"  # read at call time, not at import

# -------- Medium --------
MEDIUM_BASE = os.getenv("MEDIUM_BASE", "https://medium.com")

# -------- HTTP --------
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))
USER_AGENT = os.getenv("USER_AGENT", "addproject/1.0 (+https://example.local)")

# -------- Output --------
LOG_DIR = os.getenv("LOG_DIR", "logs")
