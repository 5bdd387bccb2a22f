"""An interactive shell with builtins, pipelines, quoting, expansion and redirections."""

__version__ = "0.1.0"