"""HTTP routers for the Dwight AI gateway."""
