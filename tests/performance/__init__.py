"""
Performance tests for declgen.

This package contains tests for rendering cost: deep declaration nesting,
wide declarations and the re-rendering done by every equality check.
"""
