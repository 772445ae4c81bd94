"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with variant configuration, validation and result computation.

Importing the package registers the built-in variants from `catalog`.
"""
from runedrakraft.model import catalog  # noqa: F401  (registration side-effects)
