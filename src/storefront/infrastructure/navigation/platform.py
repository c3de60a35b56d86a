"""Platform classifiers used to pick a deep-link navigation strategy."""

from __future__ import annotations

import re

from storefront.domain.service.deep_link import PlatformClassifier

MOBILE_USER_AGENT = re.compile(
    r"Android|webOS|iPhone|iPad|iPod|BlackBerry|IEMobile|Opera Mini|Mobile",
    re.IGNORECASE,
)


class UserAgentPlatformClassifier(PlatformClassifier):

    def __init__(self, user_agent: str | None) -> None:
        self._user_agent = user_agent or ""

    def is_mobile(self) -> bool:
        return bool(MOBILE_USER_AGENT.search(self._user_agent))


class FixedPlatformClassifier(PlatformClassifier):

    def __init__(self, mobile: bool) -> None:
        self._mobile = mobile

    def is_mobile(self) -> bool:
        return self._mobile
