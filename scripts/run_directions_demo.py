import logging

from routing import RouteRequest, RoutingServiceOptions, build_route_sources, compute_route


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    options = RoutingServiceOptions.from_env()
    sources = build_route_sources(options)

    request = RouteRequest.new(
        start_lat=30.774746,  # (lat, lon)
        start_lng=35.276701,
        end_lat=30.762593,
        end_lng=35.278288,
        spacing_m=50,
        travel_mode="Cycling",
    )

    result = compute_route(request, sources)

    print(f"\nSource: {result.provider}")
    print(f"Total distance: {result.total_distance_m:.1f}m, {result.point_count} points:\n")
    for p in result.route_points:
        print(f"#{p.sequence_number:>3} {p.distance_from_start:8.1f}m  {p.location}")


if __name__ == "__main__":
    main()
