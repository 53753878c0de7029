"""Static menu declarations.

Permission names match the ones stored by the portal API.
"""

from modules.navigation.models import NavigationItem

ADMIN_NAVIGATION = (
    NavigationItem(name="Dashboard", href="/admin/dashboard", icon="layout-dashboard"),
    NavigationItem(
        name="Content Management",
        icon="file-text",
        children=(
            NavigationItem(
                name="Hero Slides",
                href="/admin/hero-slides",
                permission="manage-hero-slides",
            ),
            NavigationItem(
                name="News & Press",
                href="/admin/news",
                permission="manage-press-releases",
            ),
            NavigationItem(
                name="About Content",
                href="/admin/about",
                permission="manage-company-info",
            ),
        ),
    ),
    NavigationItem(
        name="Products", href="/admin/products", icon="package", permission="manage-products"
    ),
    NavigationItem(
        name="Categories",
        href="/admin/categories",
        icon="package",
        permission="manage-categories",
    ),
    NavigationItem(name="Media", href="/admin/media", icon="image", permission="manage-media"),
    NavigationItem(
        name="Partners", href="/admin/partners", icon="building", permission="manage-partners"
    ),
    NavigationItem(
        name="Contact",
        href="/admin/contact",
        icon="message-square",
        permission="view-form-submissions",
    ),
    NavigationItem(name="Users", href="/admin/users", icon="users", permission="manage-users"),
    NavigationItem(
        name="Languages", href="/admin/languages", icon="globe", permission="manage-languages"
    ),
    NavigationItem(
        name="Settings", href="/admin/settings", icon="settings", permission="manage-settings"
    ),
)

PUBLIC_NAVIGATION = (
    NavigationItem(name="Home", href="/", label_key="nav.home"),
    NavigationItem(name="About", href="/about", label_key="nav.about"),
    NavigationItem(name="Products", href="/products", label_key="nav.products"),
    NavigationItem(name="Press Releases", href="/press-releases", label_key="nav.press"),
    NavigationItem(name="Partners", href="/partners", label_key="nav.partners"),
    NavigationItem(name="Contact", href="/contact", label_key="nav.contact"),
)
