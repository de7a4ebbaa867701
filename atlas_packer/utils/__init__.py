"""Utility modules for the atlas packer.

- geometry: Integer rectangle type with intersection and containment checks
- layout: Fill ratios and overlap checks for packed atlases
"""
