DEFAULTS = {
    # Run the full invariant check after every graph mutation
    "CHECK_INVARIANTS": False,
    # Sort vertices and edges in display dumps
    "DISPLAY_SORTED": False,
}
