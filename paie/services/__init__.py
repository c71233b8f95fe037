"""Services applicatifs : import d'effectif et messages d'erreur."""
