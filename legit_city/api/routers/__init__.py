# This file marks the routers package for API route modules.
# It exists so import paths stay clear when registering route groups.
# One module per resource: auth, plans, services, announcements, work, subscriptions, pages, health.
