"""Noble-gas particles in a rectangular enclosure, with wall bounces, collisions and gravity."""