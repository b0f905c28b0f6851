"""Request encoding, response decoding and transport."""
