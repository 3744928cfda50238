# Copyright 2026 TIER IV, inc.
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

"""Runtime configuration for shapecheck."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging

PACKAGE_LOGGER = "shapecheck"


@dataclass
class SchemaConfig:
    """Configuration shared by every validation call."""
    depth_limit: int = 100
    repr_limit: int = 80
    log_level: str = "WARNING"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'SchemaConfig':
        """Create configuration from environment variables."""
        return cls(
            depth_limit=int(os.getenv('SHAPECHECK_DEPTH_LIMIT', '100')),
            repr_limit=int(os.getenv('SHAPECHECK_REPR_LIMIT', '80')),
            log_level=os.getenv('SHAPECHECK_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('SHAPECHECK_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging for the shapecheck logger based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            PACKAGE_LOGGER, level=level, stderr_level=stderr_level, formatter=formatter
        )


# Global configuration instance
schema_config = SchemaConfig.from_env()
