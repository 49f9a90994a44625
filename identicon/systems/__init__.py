"""Pipeline systems.

Each module exposes a pure stage function working on plain values
(``hash_input``, ``pick_color``, ``build_grid``, ``filter_odd_cells``,
``build_pixel_map``) and a ``*_system`` wrapper that applies it to an
:class:`identicon.state.Identicon` record.
"""
