"""
fntoolbox

Functional programming toolkit: function transformers, dispatch tables and
action-keyed reducer builders for unidirectional state management.
"""

__version__ = "0.1.0"
