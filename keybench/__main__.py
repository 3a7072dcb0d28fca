from __future__ import annotations

import logging
import sys

from keybench.config import Settings, load_settings
from keybench.errors import ConfigError
from keybench.runner import BenchmarkRunner

logger = logging.getLogger("keybench")


def main() -> int:
    try:
        settings = load_settings()
        config_error = None
    except ConfigError as exc:
        settings = Settings()
        config_error = exc
    # Report goes to stdout; keep diagnostics on stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    if config_error is not None:
        logger.warning("%s; running with default settings", config_error)
    BenchmarkRunner(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
