"""Reading of Cordova ``config.xml`` files."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET

_WIDGET_TAG = "{http://www.w3.org/ns/widgets}widget"


class CordovaConfig:
    """The root ``widget`` element of a Cordova configuration."""

    def __init__(self, root: ET.Element) -> None:
        self._root = root

    @classmethod
    def load(cls, path: str | os.PathLike) -> CordovaConfig | None:
        """Parse ``path``; return None if its root is not a Cordova widget."""
        root = ET.parse(path).getroot()
        if root.tag != _WIDGET_TAG:
            return None
        return cls(root)

    def id(self) -> str:
        return self._root.get("id", "unknown")

    def version(self) -> str:
        return self._root.get("version", "0.0")

    def android_package(self) -> str:
        return self._root.get("android-packageName") or self.id()

    def ios_bundle_identifier(self) -> str:
        return self._root.get("ios-CFBundleIdentifier") or self.id()

    def ios_version(self) -> str:
        return self._root.get("ios-CFBundleVersion") or self.version()

    def android_release_name(self) -> str:
        return f"{self.android_package()}@{self.version()}"

    def ios_release_name(self) -> str:
        return f"{self.ios_bundle_identifier()}@{self.ios_version()}"