# This file marks the API package: app factory, configuration, store access, and HTTP routes.
