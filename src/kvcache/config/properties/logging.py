# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Logging configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from kvcache.core.config import config_properties


@config_properties(prefix="kvcache.logging")
@dataclass
class LoggingProperties:
    """Configuration for log output (kvcache.logging.*).

    ``level`` maps logger names to levels; the ``root`` entry sets the
    global level. ``format`` is ``console`` or ``json``.

    From the environment, ``KVCACHE_LOGGING_LEVEL`` sets the root level and
    ``StructlogAdapter`` also honours ``KVCACHE_LOGGING_LEVEL_ROOT``. Per-module
    levels cannot be set from the environment because logger names contain
    dots; set them in the config file.
    """

    level: dict[str, str] | str = field(default_factory=lambda: {"root": "INFO"})
    format: str = "console"

    @property
    def root_level(self) -> str:
        # KVCACHE_LOGGING_LEVEL=DEBUG arrives as a plain string
        if isinstance(self.level, str):
            return self.level.upper()
        return str(self.level.get("root", "INFO")).upper()

    @property
    def module_levels(self) -> dict[str, str]:
        if isinstance(self.level, str):
            return {}
        return {k: str(v).upper() for k, v in self.level.items() if k != "root"}
