"""calcgeo — Arithmetic and geometry console demo.

Runs a fixed sequence of calculations through a counting Calculator, then
describes a Point and a Circle. Output is plain text on stdout.

Usage:
    python -m calcgeo            # Print the demo
    python -m calcgeo --debug    # Same, plus one debug line
    CALCGEO_DEBUG=1 calcgeo      # Debug switch via environment
"""
