# classification.py
GITHUB = "github"
MEDIUM = "medium"
OTHER = "other"

def classify_project(url: str) -> str:
    # plain substring checks, in this order; the URL is not validated here
    u = url or ""
    if "github.com" in u:
        return GITHUB
    if "medium.com" in u:
        return MEDIUM
    return OTHER
