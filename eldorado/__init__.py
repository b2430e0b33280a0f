"""El Dorado Games backend."""
