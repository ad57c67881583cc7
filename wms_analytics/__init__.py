"""
Warehouse Analytics Engine

Heuristic order duration prediction, SKU demand forecasting and pick route
optimization, served over HTTP.

Layer Structure:
- Domain: Heuristics, entities and ports
- Application: Use cases and DTOs
- Infrastructure: Prediction cache and health checks
- Presentation: Controllers for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
