"""
This app contains the theming logic of the storefront. Every reseller serves the storefront from its own domain,
and the theme registered for that domain decides which templates and assets are used.

Components:
    Domains (storefront.theming.domains.get_domain):
        Canonical domain of a request host. One leading label is stripped from hosts with more than two labels,
        e.g. 'www.example.com' becomes 'example.com'. IP addresses have no domain and use the default theme.

    Theme Resolver (storefront.theming.themes.ThemeResolver):
        Maps a domain to the theme of its reseller (storefront.resellers.models.Reseller). Domains without a
        reseller or with a blank theme use the 'Default' theme. Results are kept in the shared resolution cache.

    Template Path Resolver (storefront.theming.template_paths.TemplatePathResolver):
        Expands location formats (e.g. "~/Themes/{2}/Views/{1}/{0}.html") with the template name, controller and
        theme, and returns the first existing file. If the theme provides none of them, the same locations are
        searched in the 'Default' theme. Rooted names (starting with '~' or '/') are checked directly.

    View Engine (storefront.theming.engine.ThemedViewEngine):
        Resolves a view and its master, or a partial view, for the theme of the current request. When nothing
        is found the result lists all locations that were searched.

    Stylesheet Resolver (storefront.theming.stylesheets.StylesheetResolver):
        Returns the stylesheet of the current theme, or the default stylesheet if the theme has none.

    Middleware (storefront.theming.middleware.CurrentThemeMiddleware):
        Resolves and caches the theme of every request and sets it as `request.theme`.

    Template Loaders (storefront.theming.template_loaders.ThemedTemplateLoader):
        Theming aware template loader, django template names are resolved through the view engine.
"""
