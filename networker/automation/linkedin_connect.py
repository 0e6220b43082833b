"""
Opens target contacts' LinkedIn profiles in Google Chrome and clicks the
Connect ("Invite") button via AppleScript. macOS only; every failure is
logged and skipped.
"""
from __future__ import annotations

import logging
import random
import subprocess
import time
from typing import Callable, Iterable, Optional

from networker.config.settings import Settings
from networker.models import ProfileRecord

logger = logging.getLogger(__name__)

OSASCRIPT = "osascript"


def build_connect_script() -> str:
    """JavaScript that clicks the profile page's Connect button if present."""
    return "".join([
        "(function() {",
        '  var btn = document.querySelector("button[aria-label^=\\"Invite\\"]");',
        "  if (btn) {",
        "    btn.click();",
        '    console.log("Clicked Connect button");',
        "  } else {",
        '    console.log("Connect button not found");',
        "  }",
        "})();",
    ])


def escape_applescript(text: str) -> str:
    """Collapse whitespace and escape for an AppleScript string literal."""
    collapsed = " ".join(text.split())
    return collapsed.replace("\\", "\\\\").replace('"', '\\"')


class LinkedInConnector:
    def __init__(
        self,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
        min_delay: float = 2.0,
        max_delay: float = 5.0,
        page_load_seconds: float = 2.0,
    ) -> None:
        self.runner = runner
        self.sleep = sleep
        self.rng = rng or random.Random()
        self.min_delay = min_delay
        self.max_delay = max(min_delay, max_delay)
        self.page_load_seconds = page_load_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "LinkedInConnector":
        return cls(
            min_delay=settings.automation_min_delay,
            max_delay=settings.automation_max_delay,
            page_load_seconds=settings.automation_page_load_seconds,
        )

    def _osascript(self, script: str) -> Optional[str]:
        try:
            completed = self.runner(
                [OSASCRIPT],
                input=script,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            logger.warning("osascript failed (exit %s): %s", exc.returncode, (exc.stderr or "").strip(), extra={"step": "connect", "status": "error"})
            return None
        except OSError as exc:
            logger.warning("osascript unavailable: %s", exc, extra={"step": "connect", "status": "error"})
            return None
        return (completed.stdout or "").strip()

    def open_profile(self, url: str) -> Optional[int]:
        """Open ``url`` in a new Chrome tab; returns its tab index."""
        script = "\n".join([
            'tell application "Google Chrome"',
            "  activate",
            "  if (count of windows) = 0 then make new window",
            f'  tell front window to make new tab with properties {{URL:"{escape_applescript(url)}"}}',
            "  return count of tabs of front window",
            "end tell",
        ])
        output = self._osascript(script)
        if not output:
            return None
        try:
            return int(output)
        except ValueError:
            logger.warning("Unexpected tab index from Chrome: %r", output)
            return None

    def inject(self, tab_index: int, javascript: str) -> bool:
        script = "\n".join([
            'tell application "Google Chrome"',
            f"  tell tab {tab_index} of front window",
            f'    execute javascript "{escape_applescript(javascript)}"',
            "  end tell",
            "end tell",
        ])
        return self._osascript(script) is not None

    def pause(self) -> None:
        self.sleep(self.rng.uniform(self.min_delay, self.max_delay))

    def connect(self, profile: ProfileRecord) -> bool:
        if not profile.linkedin_url:
            return False
        logger.info("Automating connection for %s", profile.name, extra={"step": "connect"})
        tab_index = self.open_profile(profile.linkedin_url)
        if tab_index is None:
            return False
        # Let the profile page render before looking for the button
        self.sleep(self.page_load_seconds)
        injected = self.inject(tab_index, build_connect_script())
        if injected:
            logger.info("JavaScript injected into tab %s", tab_index, extra={"step": "connect", "status": "ok"})
        return injected

    def connect_all(self, profiles: Iterable[ProfileRecord]) -> int:
        """Prime connection requests one profile at a time; returns how many succeeded."""
        primed = 0
        for index, profile in enumerate(profiles):
            if index:
                self.pause()
            if self.connect(profile):
                primed += 1
        return primed
