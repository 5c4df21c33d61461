"""Cross-cutting helpers shared by the API and scripts: settings, logging, engine, and tables."""
