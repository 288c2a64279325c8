# personapi/cli/api.py
from personapi.logging import get_logger

logger = get_logger(__file__)


def register_subcommands(subparsers):
    subparsers.add_parser("status", help="explain how to run the server")
    start = subparsers.add_parser("start", help="serve the person API with uvicorn")
    start.add_argument("--host", default="localhost")
    start.add_argument("--port", type=int, default=8000)


def _status(args) -> None:
    logger.info("person API is not managed by this process; use `personapi api start`")


def _start(args) -> None:
    # imported lazily so `api status` works without building the app
    from personapi.api.main import app
    import uvicorn

    logger.info("serving person API on http://%s:%s/api/v1/person", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)


COMMANDS = {"status": _status, "start": _start}


def dispatch(args):
    handler = COMMANDS.get(args.subcommand)
    if handler is None:
        message = f"No handler for API subcommand: {args.subcommand}"
        logger.error(message)
        raise ValueError(message)
    handler(args)
