import json
import logging
import os
import sys
from pathlib import Path

import click
import requests
from dotenv import load_dotenv

from shamir_recovery.models.reconstruct_output import ReconstructOutput
from shamir_recovery.services.reconstruction_service import LagrangeReconstructionService
from shamir_recovery.services.share_set_loader import load_share_set

load_dotenv()

DEFAULT_SERVER = os.getenv("RECOVERY_SERVER", "http://127.0.0.1:8000")
DEFAULT_TIMEOUT = 5


def recover_remote(path: Path, server: str) -> ReconstructOutput:
    with open(path, "r") as f:
        document = json.load(f)

    resp = requests.post(
        f"{server}/reconstruct/document",
        params={"name": path.stem},
        json=document,
        timeout=DEFAULT_TIMEOUT,
    )
    resp.raise_for_status()
    return ReconstructOutput.model_validate(resp.json())


def recover_local(path: Path) -> ReconstructOutput:
    return LagrangeReconstructionService().process(load_share_set(path))


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--local", is_flag=True, help="Reconstruct in-process instead of calling the server.")
@click.option("--server", default=DEFAULT_SERVER, show_default=True, help="Base URL of the recovery server.")
def main(files: tuple[Path, ...], local: bool, server: str):
    """Recover the secret of each share-set FILE."""
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())
    failed = False

    for path in files:
        try:
            output = recover_local(path) if local else recover_remote(path, server)
        except (ValueError, KeyError, TypeError, requests.RequestException) as e:
            click.echo(f"Error {path.stem}: {e}", err=True)
            failed = True
            continue

        if output.error_kind is not None:
            click.echo(f"Error {output.name}: [{output.error_kind.value}] {output.error}", err=True)
            failed = True
        else:
            click.echo(f"Secret {output.name}: {output.secret}")

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
