"""
Landscape Intelligence Network

A curated catalogue of deep-time records and the relational graph
derived from them for interactive exploration.

Systems:
- Taxonomy Registry: static category/source/interface/indeterminacy/phase tables
- Entry Store: ordered, append-only catalogue of entries
- Relation Engine: typed pairwise relations among a subset of entries
- Filter Engine: compound acceptance sets plus free-text search
- Color Mapping: categorical and logarithmic temporal coloring
"""

__version__ = "0.1.0"
