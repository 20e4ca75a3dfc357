"""Package entry point for ``python -m transcript_aligner``."""

from transcript_aligner.cli import main

if __name__ == "__main__":
    main()
