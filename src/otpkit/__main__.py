"""Run the otpkit CLI with ``python -m otpkit``."""

from otpkit.cli import main

main()
