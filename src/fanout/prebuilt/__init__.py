from fanout.prebuilt.demo import app, main

__all__ = ["app", "main"]
