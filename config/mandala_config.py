"""
Mandala Configuration Constants
===============================

Fixed parameters of the placement heuristic and of mandala overlap.
Runtime-tunable values live in config.settings.

Author: MindGraph Team
"""

# ============================================================================
# Placement
# ============================================================================

# Candidates sampled per placement once a cell is occupied
DEFAULT_CANDIDATE_ATTEMPTS = 30
MIN_CANDIDATE_ATTEMPTS = 1
MAX_CANDIDATE_ATTEMPTS = 1000

# ============================================================================
# Overlap
# ============================================================================

COMPOSITE_CENTER_NAME = "Centro Compuesto ({count} personajes)"
COMPOSITE_CENTER_DESCRIPTION = "Combinación de personajes centrales de {count} mandalas"

# Fewest mandalas an overlap accepts
MIN_OVERLAP_MANDALAS = 2
