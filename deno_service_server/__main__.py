"""Allow ``python -m deno_service_server``."""

from deno_service_server.server import main

main()
