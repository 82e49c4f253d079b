"""Chart geometry, layout constants and rendering helpers.

The geometry builders turn aggregated analytics series into renderer-agnostic
primitives; `render` wires a full pass and `svg` is the web host's renderer.
"""
