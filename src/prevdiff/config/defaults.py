"""Starter .prevdiff.toml template."""

DEFAULT_TOML = """\
# prevdiff configuration
version = "1.0"

[git]
binary = "git"
timeout = 30              # seconds per git invocation

[output]
format = "terminal"       # terminal | json
show_paths = true

[log]
level = "warning"         # debug | info | warning | error
"""
