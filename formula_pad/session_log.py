"""
Session logging for Formula Pad.

SessionLogger configures the package logger ("formula_pad") with a file
handler and a console handler, and appends editing events to a JSONL file
next to the log.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

PACKAGE_LOGGER = "formula_pad"


class SessionLogger:
    """Logger that writes editor messages to file and console, events to JSONL."""

    def __init__(self, log_dir, session_name: str = "editor",
                 level: int = logging.INFO):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_name = f"{session_name}_{timestamp}"

        # Log file paths
        self.log_file = self.log_dir / f"{self.session_name}.log"
        self.events_file = self.log_dir / f"{self.session_name}_events.jsonl"

        self.logger = logging.getLogger(PACKAGE_LOGGER)
        self.logger.setLevel(level)

        # Clear any existing handlers (re-created sessions in one process)
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        fh = logging.FileHandler(self.log_file, encoding='utf-8')
        fh.setLevel(level)

        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(level)

        formatter = logging.Formatter('%(asctime)s | %(message)s', datefmt='%H:%M:%S')
        fh.setFormatter(formatter)
        ch.setFormatter(formatter)

        self.logger.addHandler(fh)
        self.logger.addHandler(ch)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def info(self, msg: str):
        self.logger.info(msg)
        for handler in self.logger.handlers:
            handler.flush()

    def log_event(self, event: str, **data):
        """Record an editing event (insert, favorite change, ...)."""
        record = {'event': event, **data, 'timestamp': datetime.now().isoformat()}
        self.logger.debug(f"{event} {data}")
        try:
            with open(self.events_file, 'a', encoding='utf-8') as f:
                f.write(json.dumps(record, ensure_ascii=False) + '\n')
        except OSError as e:
            self.logger.warning(f"Could not write event log: {e}")

    def log_config(self, config):
        """Log configuration at session start."""
        self.logger.info("=" * 80)
        self.logger.info("EDITOR CONFIGURATION")
        self.logger.info("=" * 80)
        self.logger.info(f"Config: {config.to_dict()}")
        self.logger.info("=" * 80)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
