"""
Command line entry point.

    python -m greenlight reference-image --out reference.jpg [--size 512]
    python -m greenlight purge-expired
"""

# Standard library imports
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

# Local application imports
from .application.use_cases.permit import GetReferenceImageUseCase, RemoveExpiredPermitsUseCase
from .main import create_application


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="greenlight", description="Permit backend tools")
    commands = parser.add_subparsers(dest="command", required=True)

    reference = commands.add_parser("reference-image", help="Write the current reference ticket image")
    reference.add_argument("--out", required=True, help="Output JPEG path")
    reference.add_argument("--size", type=int, default=None, help="Edge length in pixels")

    commands.add_parser("purge-expired", help="Delete all expired permits")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    container = create_application()

    if args.command == "reference-image":
        use_case = container.get(GetReferenceImageUseCase)
        jpeg = asyncio.run(use_case.execute(args.size))
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(jpeg)
        print(str(out_path))
        return 0

    use_case = container.get(RemoveExpiredPermitsUseCase)
    removed = asyncio.run(use_case.execute())
    print(f"Removed {removed} expired permit(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
