"""Allow jaeger-sender to be executable through `python -m jaeger_sender`."""
from jaeger_sender.cli import cli


if __name__ == "__main__":  # pragma: no cover
    cli(prog_name="jaeger-sender")
