"""Building blocks for reading YAML: streams, character sources and parser state."""