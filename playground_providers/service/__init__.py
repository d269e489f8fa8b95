"""HTTP service and CLI front-ends for the playground."""
