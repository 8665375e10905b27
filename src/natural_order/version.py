import re
from typing import NamedTuple

__all__ = ["version", "version_info", "VersionInfo"]


version = "1.0.0"


_re_version = re.compile(
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)"
    r"(?:(?P<level>a|b|rc)(?P<serial>\d+))?$"
)

_release_levels = {"a": "alpha", "b": "beta", "rc": "candidate"}


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        match = _re_version.match(v)
        if not match:
            msg = f"Invalid version string: {v!r}."
            raise ValueError(msg)
        level = match.group("level")
        serial = match.group("serial")
        return cls(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("micro")),
            _release_levels[level] if level else "final",
            int(serial) if serial else 0,
        )

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel != "final":
            level = "rc" if self.releaselevel == "candidate" else self.releaselevel[:1]
            v = f"{v}{level}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
