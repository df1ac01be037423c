"""CLI sub-command modules. Importing a module registers its commands on the app."""
