"""
CLI Commands Module

- sky: Limiting magnitude, sky brightness, extinction and visibility
- site: Saved observer site
"""
