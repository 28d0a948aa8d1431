"""logline demo — emits a few sample lines through the text line formatter."""

import logging
import os
import sys

from logline.adapter import FieldLogger
from logline.config import configure_logging, load_config, load_yaml_config


def main():
    config = load_config(load_yaml_config(os.environ.get("LOGLINE_CONFIG")))
    log = FieldLogger(configure_logging(config, stream=sys.stdout, name="logline.demo"))

    log.info("service started")
    request_log = log.with_fields({"method": "GET", "path": "/orders", "status": 200})
    request_log.info("request handled")
    request_log.with_field("level", "user-supplied").warning("reserved field kept as fields.level")
    log.with_field("note", 'said "hi"\nand left').debug("values are quoted")

    try:
        raise ConnectionError("upstream timed out")
    except ConnectionError as e:
        log.with_error(e).error("fetch failed")
        logging.getLogger("logline.demo").exception("fetch failed again")


if __name__ == "__main__":
    main()
