"""
Account Value UI: a Reflex application for valuing public inventories.

A user enters a numeric account id; the app checks that the inventory is
public, fetches its collectibles value and the account profile from the
remote valuation service, and renders the result.

Subpackages:
- components: Reflex UI components
- models: Domain models, payload parsing and page state
- services: Valuation service access (HTTPS and demo implementations)
- lib: Logging

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
