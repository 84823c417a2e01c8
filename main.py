import sys
from pathlib import Path


def main() -> int:
    root = Path(__file__).resolve().parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from maxsumline.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
