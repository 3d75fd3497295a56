"""HTTP endpoint modules, one router each."""
