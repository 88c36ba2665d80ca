"""Location module: the place hierarchy and its customizable attributes."""
