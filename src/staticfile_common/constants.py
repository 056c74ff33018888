"""Shared constants for the staticfile buildpack."""

# Files read from the build directory
STATICFILE_NAME = "Staticfile"
STATICFILE_AUTH_NAME = "Staticfile.auth"

# Runtime layout (relative to the build directory)
PUBLIC_DIR = "public"
NGINX_DIR = "nginx"
NGINX_CONF_DIR = "nginx/conf"
NGINX_LOGS_DIR = "nginx/logs"

# Files inside nginx/conf
NGINX_CONF_NAME = "nginx.conf"
MIME_TYPES_NAME = "mime.types"
HTPASSWD_NAME = ".htpasswd"

# Startup files
BOOT_SCRIPT = "boot.sh"
START_LOGGING_SCRIPT = "start_logging.sh"
PROFILE_D_DIR = "profile.d"
PROFILE_SCRIPT = "staticfile.sh"

# Build/deploy metadata that never becomes served content
METADATA_BLACKLIST = frozenset(
    {
        STATICFILE_NAME,
        STATICFILE_AUTH_NAME,
        "manifest.yml",
        ".profile",
        "stackato.yml",
        ".profile.d",
        ".cloudfoundry",
        NGINX_DIR,
    }
)

# nginx defaults
HSTS_MAX_AGE = 31536000

# Docs
BASIC_AUTH_DOCS_URL = "https://docs.cloudfoundry.org/buildpacks/staticfile/index.html#authentication"
NGINX_BUILDPACK_URL = "https://github.com/cloudfoundry/nginx-buildpack"
