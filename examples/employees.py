"""Employee directory served as a REST resource.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

    GET     /employees       list employees
    POST    /employees       {"name": "..."} -> new id
    GET     /employees/:id   one employee
    PUT     /employees/:id   replace an employee
    DELETE  /employees/:id   remove an employee

Run:
    python examples/employees.py --config server.yaml
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from roadresource_core import (
    MemoryResource,
    Response,
    Router,
    Server,
    configure_logging,
    load_config,
)


@dataclass
class Employee:
    name: str


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config", help="JSON or YAML config file")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.log_level, config.log_format)

    router = Router()
    router.handle_resource("/employees", MemoryResource(Employee))
    router.handle_func("/health", lambda request: Response.text("ok"))

    Server(router, config).run()


if __name__ == "__main__":
    main()
