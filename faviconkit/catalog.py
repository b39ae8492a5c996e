"""Fixed catalog of derived icons, one descriptor per servable image."""

from typing import Tuple

from .models import IconDescriptor

APPLE_TOUCH_ICON = IconDescriptor("apple-touch-icon.png", 180, source="alternate")
FAVICON = IconDescriptor("favicon.png", 48)
FAVICON_32 = IconDescriptor("favicon-32x32.png", 32)
FAVICON_16 = IconDescriptor("favicon-16x16.png", 16)
ANDROID_CHROME_192 = IconDescriptor("android-chrome-192x192.png", 192)
ANDROID_CHROME_512 = IconDescriptor("android-chrome-512x512.png", 512)
MSTILE_150 = IconDescriptor("mstile-150x150.png", 150)

ICON_CATALOG: Tuple[IconDescriptor, ...] = (
    APPLE_TOUCH_ICON,
    FAVICON,
    FAVICON_32,
    FAVICON_16,
    ANDROID_CHROME_192,
    ANDROID_CHROME_512,
    MSTILE_150,
)

# Icons referenced by the webmanifest, in document order.
MANIFEST_ICONS: Tuple[IconDescriptor, ...] = (ANDROID_CHROME_192, ANDROID_CHROME_512)

WEBMANIFEST_PATH = "/site.webmanifest"
WEBMANIFEST_MEDIA_TYPE = "application/manifest+json"
BROWSERCONFIG_PATH = "/browserconfig.xml"
BROWSERCONFIG_MEDIA_TYPE = "application/xml"
