"""Core — generator models, argument compilers, config loading and use cases."""
