from rides.mock_data import generate_mock_rides


def write_mock_rides(num_rides=500, output_file="rides_generated.csv", seed=None):
    """
    Generates a synthetic snapshot of the rides collection and saves it as CSV,
    ready for load_offers_csv / run_search_simulation.py.
    """
    df = generate_mock_rides(num_rides, seed=seed)
    df.to_csv(output_file, index=False)
    print(f"✅ Generated {num_rides} rides and saved to '{output_file}'")

    # Quick preview of route density
    print("\nTop 5 Pickup Addresses by city (Search Potential):")
    cities = df["pickupLocation"].str.split(",").str[-2].str.strip()
    for name, count in cities.value_counts().head(5).items():
        print(f"  {name}: {count} rides")

    missing = df["pickupLat"].isna().sum()
    print(f"\nRides without pickup coordinates: {missing}")


if __name__ == "__main__":
    write_mock_rides(num_rides=500, seed=42)
