from dataclasses import dataclass
from typing import Optional


DEFAULT_URL = "https://www.google.com/images/branding/product/ico/googleg_lodp.ico"
DEFAULT_USER_AGENT = "downloadcheck/1.0"


@dataclass(frozen=True)
class DownloadConfig:
    url: str = DEFAULT_URL
    user_agent: str = DEFAULT_USER_AGENT
    # None leaves the socket default in place
    request_timeout: Optional[float] = None
    max_redirects: int = 5
