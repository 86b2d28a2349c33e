"""Default catalogue used to seed an empty store."""

DEFAULT_CATEGORIES = [
    {"name": "Pipe Clamps", "description": "Clamps and supports for PVC pipework"},
    {"name": "Flanges", "description": "Flanged connections for industrial lines"},
    {"name": "Couplings", "description": "Permanent and quick-connect couplings"},
    {"name": "Valves", "description": "Ball valves and flow control devices"},
    {"name": "Adapters", "description": "Threaded and transition adapters"},
    {"name": "Fittings", "description": "Elbows, tees and other fittings"},
]

DEFAULT_PRODUCTS = [
    {
        "name": "Heavy Duty PVC Pipe Clamp",
        "description": "Robust pipe clamp designed for high-pressure applications with superior grip and durability.",
        "category": "Pipe Clamps",
        "material": "PVC with Steel Reinforcement",
        "sizeRange": '1/2" - 8"',
        "pressureRating": "300 PSI",
        "temperatureRange": "-10°C to 80°C",
        "applications": ["Water supply systems", "Industrial piping", "Chemical processing", "HVAC systems"],
        "additionalSpecs": ["NSF certified", "UV resistant", "Corrosion resistant", "Easy installation"],
    },
    {
        "name": "Standard PVC Flange",
        "description": "High-quality PVC flange for secure pipe connections in various industrial applications.",
        "category": "Flanges",
        "material": "PVC",
        "sizeRange": '2" - 12"',
        "pressureRating": "150 PSI",
        "temperatureRange": "0°C to 60°C",
        "applications": [
            "Water treatment plants",
            "Chemical processing",
            "Food and beverage industry",
            "Pharmaceutical applications",
        ],
        "additionalSpecs": ["ANSI standard", "Smooth finish", "Chemical resistant", "Long service life"],
    },
    {
        "name": "Quick Connect Coupling",
        "description": "Fast and reliable coupling system for temporary or permanent pipe connections.",
        "category": "Couplings",
        "material": "PVC with Rubber Seals",
        "sizeRange": '1" - 6"',
        "pressureRating": "200 PSI",
        "temperatureRange": "-5°C to 70°C",
        "applications": ["Irrigation systems", "Pool and spa installations", "Temporary piping", "Maintenance applications"],
        "additionalSpecs": ["Tool-free installation", "Leak-proof design", "Reusable", "Color-coded sizes"],
    },
    {
        "name": "Ball Valve PVC",
        "description": "Reliable ball valve for flow control in PVC piping systems with smooth operation.",
        "category": "Valves",
        "material": "PVC Body with PTFE Ball",
        "sizeRange": '1/2" - 4"',
        "pressureRating": "250 PSI",
        "temperatureRange": "0°C to 65°C",
        "applications": ["Water distribution", "Chemical handling", "Pool systems", "Industrial processes"],
        "additionalSpecs": ["Full port design", "Lever handle", "Bubble-tight seal", "Low torque operation"],
    },
    {
        "name": "Threaded Adapter",
        "description": "Versatile threaded adapter for connecting different pipe types and sizes.",
        "category": "Adapters",
        "material": "PVC",
        "sizeRange": '1/2" - 3"',
        "pressureRating": "200 PSI",
        "temperatureRange": "-10°C to 60°C",
        "applications": ["Pipe transitions", "Equipment connections", "Repair applications", "System modifications"],
        "additionalSpecs": ["NPT threads", "Precision machined", "Multiple configurations", "Easy installation"],
    },
    {
        "name": "Elbow Fitting 90°",
        "description": "Smooth 90-degree elbow fitting for directional changes in piping systems.",
        "category": "Fittings",
        "material": "PVC",
        "sizeRange": '1/2" - 10"',
        "pressureRating": "200 PSI",
        "temperatureRange": "0°C to 60°C",
        "applications": ["Plumbing systems", "Drainage applications", "Ventilation systems", "Industrial piping"],
        "additionalSpecs": ["Smooth interior", "Socket connections", "Standard dimensions", "High flow capacity"],
    },
]
