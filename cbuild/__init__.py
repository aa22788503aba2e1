"""cbuild - make-style front-end for cargo builds."""

__version__ = "0.1.0"
