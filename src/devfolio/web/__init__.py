"""Server-rendered pages: the public site, the login screen and the admin area."""
