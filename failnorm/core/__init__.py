# failnorm/core/__init__.py
