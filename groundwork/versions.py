"""Dotted numeric versions, build version info and its wire encoding."""

from __future__ import annotations

import datetime
import functools
import platform
import re
import sys
from dataclasses import dataclass, field

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT64_MASK = (1 << 64) - 1
_FIELD_SEPARATOR = "|"
_FIELD_COUNT = 5


def _parse_part(part: str) -> int:
    if not _INTEGER.fullmatch(part):
        raise ValueError(f'strconv.ParseInt: parsing "{part}": invalid syntax')
    value = int(part)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{part}": value out of range')
    # Parts are stored unsigned; negative values wrap around.
    return value & _UINT64_MASK


@functools.total_ordering
@dataclass(frozen=True)
class SemVer:
    """A version made of any number of dot-separated numeric parts."""

    parts: tuple[int, ...] = ()

    def compare_to(self, other: SemVer) -> int:
        """Return -1, 0 or 1; a version with extra parts sorts after its prefix."""
        for idx, part in enumerate(self.parts):
            if len(other.parts) < idx + 1:
                return 1
            if part > other.parts[idx]:
                return 1
            if part < other.parts[idx]:
                return -1
        if len(other.parts) > len(self.parts):
            return -1
        return 0

    def equals(self, other: SemVer) -> bool:
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)


def parse_sem_ver(version: str) -> SemVer:
    """Parse a version such as 'v1.2.3'; raise ValueError if a part is not an integer."""
    stripped = version.removeprefix("v")
    return SemVer(tuple(_parse_part(part) for part in stripped.split(".")))


_DEVELOPMENT_VERSION = parse_sem_ver("0.0.0")


@dataclass
class VersionInfo:
    """Version, revision, build date and platform of a build."""

    version: str = ""
    revision: str = ""
    build_date: str = ""
    os: str = ""
    arch: str = ""

    def get_version(self) -> SemVer:
        return parse_sem_ver(self.version)

    def has_minimum_version(self, compare_version: str) -> bool:
        """Return whether this version is at least compare_version.

        A development version (0.0.0) always qualifies; an unparsable
        compare_version never does. Raises ValueError if this version is invalid.
        """
        try:
            required = parse_sem_ver(compare_version)
        except ValueError:
            return False
        version = self.get_version()
        return version.compare_to(required) >= 0 or version.equals(_DEVELOPMENT_VERSION)


class VersionEncDec:
    """Encodes VersionInfo as pipe-separated fields."""

    def encode(self, info: VersionInfo) -> bytes:
        fields = (info.version, info.revision, info.build_date, info.os, info.arch)
        return _FIELD_SEPARATOR.join(fields).encode("utf-8")

    def decode(self, data: bytes) -> VersionInfo:
        """Parse encoded version info; raise ValueError unless it has five fields."""
        values = data.decode("utf-8", errors="replace").split(_FIELD_SEPARATOR)
        if len(values) != _FIELD_COUNT:
            raise ValueError(
                "could not parse version info, expected 5 values "
                f"got {len(values)}"
            )
        return VersionInfo(*values)


STD_VERSION_ENC_DEC = VersionEncDec()


@dataclass
class DefaultVersionProvider:
    """Supplies version details from a VersionInfo."""

    info: VersionInfo = field(default_factory=VersionInfo)

    def version(self) -> str:
        return self.info.version

    def build_date(self) -> str:
        return self.info.build_date

    def revision(self) -> str:
        return self.info.revision

    def as_version_info(self) -> VersionInfo:
        return self.info

    def encoder_decoder(self) -> VersionEncDec:
        return STD_VERSION_ENC_DEC


_OS_NAMES = {"win32": "windows", "cygwin": "windows", "darwin": "darwin"}
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def _os_name() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    return _OS_NAMES.get(sys.platform, sys.platform)


def _arch_name() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def new_default_version_provider() -> DefaultVersionProvider:
    """Return a provider for a development build made now on this platform."""
    return DefaultVersionProvider(
        VersionInfo(
            version="v0.0.0",
            revision="",
            build_date=str(datetime.datetime.now().astimezone()),
            os=_os_name(),
            arch=_arch_name(),
        )
    )