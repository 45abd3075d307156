"""Allow `python -m argquote`."""

from argquote.cli import main

raise SystemExit(main())
