"""ViennaFlow API: stations, platforms and lines of the Vienna network as GeoJSON."""
