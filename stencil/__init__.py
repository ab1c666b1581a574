"""stencil -- interactive project generator.

Asks a tree of typed questions, then executes the ordered copy/transform
instructions of a declarative template against the collected answers.
"""

__version__ = "0.3.0"
