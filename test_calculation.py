#!/usr/bin/env python3
"""
Quick calculation test without API.

Runs a full design for a sample site with a fixed rainfall figure.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from rainwater_harvesting.api import StaticRainfallProvider
from rainwater_harvesting.services import DesignService


def test_calculation():
    """Run a design calculation with sample data."""
    print("=" * 60)
    print("Rainwater Harvesting Design Test (No API Required)")
    print("=" * 60)
    print()

    payload = {
        "lat": 18.5204,
        "lng": 73.8567,
        "roofArea": 100,       # m²
        "roofType": "concrete",
        "dwellers": 4,
        "floors": 2,
        "soilType": "loamy",
        "includeGround": True,
        "groundArea": 150,     # m²
        "groundSurfaces": ["gravel", "parks"],
    }
    rainfall_mm = 800.0

    print("Input Data:")
    print("-" * 60)
    for key, value in payload.items():
        print(f"  {key}: {value}")
    print(f"  rainfall: {rainfall_mm} mm/yr (fixed)")
    print()

    service = DesignService(rainfall_provider=StaticRainfallProvider(rainfall_mm))
    result = service.run(payload)

    print("Results:")
    print("=" * 60)
    print(f"Annual Runoff:            {result.runoff.total_liters_per_year} L/yr")
    print(f"  Roof:                   {result.runoff.roof_liters_per_year} L/yr")
    print(f"  Ground:                 {result.runoff.ground_liters_per_year} L/yr")
    print(f"Annual Need:              {result.feasibility.annual_need_liters} L/yr")
    print(f"Coverage Ratio:           {result.feasibility.coverage_ratio:.3f}")
    print(f"Feasible:                 {result.feasibility.feasible}")
    print(f"Aquifer Structure:        {result.aquifer_type}")
    print()

    print("Design:")
    print("-" * 60)
    hydraulics = result.hydraulics
    print(f"Velocity:                 {hydraulics.velocity_m_s:.2f} m/s ({hydraulics.velocity_source})")
    print(f"Pipe Diameter:            {hydraulics.diameter_mm} mm")
    print(f"Pipe Length:              {hydraulics.total_length_m} m -> {hydraulics.chosen_pipe.id}")
    print(f"Filter:                   {result.filters.chosen.id} x{result.filters.chosen.units_required}")
    print(f"Pit Volume:               {result.pit.volume_m3} m³")
    print(f"Channel Length:           {result.channel.length_m} m")
    print(f"Total Cost:               {result.costs.total}")
    print()

    print("=" * 60)
    print("✓ Calculation completed successfully!")
    print("=" * 60)

    return True


def main():
    """Main entry point."""
    try:
        success = test_calculation()
        sys.exit(0 if success else 1)
    except Exception as e:
        print(f"\n✗ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
