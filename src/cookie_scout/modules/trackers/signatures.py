"""Known tracking service signatures and third-party domain types."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# (pattern, category, description). Patterns are regular expressions matched
# case-insensitively anywhere in a URL or inline script body.
TRACKER_SIGNATURES: tuple[tuple[str, str, str], ...] = (
    # Analytics
    ("google-analytics", "Analytics", "Google Analytics tracking"),
    ("googletagmanager", "Analytics", "Google Tag Manager"),
    ("gtag", "Analytics", "Google Global Site Tag"),
    ("analytics", "Analytics", "Generic analytics"),
    ("hotjar", "Analytics", "Hotjar behavior analytics"),
    ("mixpanel", "Analytics", "Mixpanel analytics"),
    ("segment", "Analytics", "Segment analytics"),
    ("amplitude", "Analytics", "Amplitude analytics"),
    ("plausible", "Analytics", "Plausible analytics"),
    ("matomo", "Analytics", "Matomo analytics"),
    ("heap", "Analytics", "Heap analytics"),
    ("fullstory", "Analytics", "FullStory session replay"),
    ("clarity", "Analytics", "Microsoft Clarity"),
    # Marketing
    ("doubleclick", "Marketing", "Google DoubleClick advertising"),
    ("facebook.*pixel", "Marketing", "Facebook Pixel"),
    ("fbevents", "Marketing", "Facebook Events"),
    ("ads", "Marketing", "Advertising scripts"),
    ("adsense", "Marketing", "Google AdSense"),
    ("adwords", "Marketing", "Google AdWords"),
    ("criteo", "Marketing", "Criteo retargeting"),
    ("taboola", "Marketing", "Taboola content ads"),
    ("outbrain", "Marketing", "Outbrain content ads"),
    ("pinterest", "Marketing", "Pinterest tracking"),
    ("linkedin.*insight", "Marketing", "LinkedIn Insight Tag"),
    ("twitter.*pixel", "Marketing", "Twitter Pixel"),
    ("tiktok", "Marketing", "TikTok tracking"),
    ("snapchat", "Marketing", "Snapchat tracking"),
    # Social
    ("facebook.com", "Social", "Facebook integration"),
    ("twitter.com", "Social", "Twitter integration"),
    ("linkedin.com", "Social", "LinkedIn integration"),
    ("instagram.com", "Social", "Instagram integration"),
    ("youtube.com", "Social", "YouTube embeds"),
    ("vimeo.com", "Social", "Vimeo embeds"),
    # Other
    ("recaptcha", "Security", "Google reCAPTCHA"),
    ("hcaptcha", "Security", "hCaptcha"),
    ("cloudflare", "CDN/Security", "Cloudflare services"),
    ("sentry", "Error Tracking", "Sentry error tracking"),
    ("bugsnag", "Error Tracking", "Bugsnag error tracking"),
    ("intercom", "Customer Support", "Intercom chat"),
    ("drift", "Customer Support", "Drift chat"),
    ("zendesk", "Customer Support", "Zendesk support"),
    ("hubspot", "Marketing/CRM", "HubSpot tracking"),
    ("marketo", "Marketing", "Marketo tracking"),
    ("pardot", "Marketing", "Pardot tracking"),
    ("optimizely", "A/B Testing", "Optimizely experiments"),
    ("vwo", "A/B Testing", "VWO experiments"),
)


def _compile_signatures() -> tuple[tuple[re.Pattern[str], str, str, str], ...]:
    compiled: list[tuple[re.Pattern[str], str, str, str]] = []
    for pattern, category, description in TRACKER_SIGNATURES:
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error:
            logger.warning("Skipping invalid tracker signature %r", pattern)
            continue
        compiled.append((regex, pattern, category, description))
    return tuple(compiled)


# Compiled once at import, same order as TRACKER_SIGNATURES.
COMPILED_SIGNATURES = _compile_signatures()

# Substring hints → (type, explanation), first match wins.
DOMAIN_TYPES: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("google", "gstatic"), "Google Services", "Analytics, fonts, APIs, or advertising"),
    (("facebook", "fbcdn"), "Facebook/Meta", "Social plugins or tracking"),
    (("cloudflare",), "Cloudflare", "CDN and security services"),
    (("cdn", "akamai", "fastly"), "CDN", "Content delivery network"),
    (("analytics", "tracking"), "Analytics", "User tracking and analytics"),
    (("ads", "doubleclick"), "Advertising", "Ad serving and tracking"),
    (("twitter", "linkedin"), "Social Media", "Social network integration"),
    (("stripe", "paypal"), "Payment", "Payment processing"),
    (("sentry", "bugsnag"), "Error Tracking", "Error monitoring service"),
)

DEFAULT_DOMAIN_TYPE = ("External", "Third-party resource")


def classify_domain(domain: str) -> tuple[str, str]:
    """Guess what kind of service a third-party domain is.

    Returns (type, explanation).
    """
    domain_lower = domain.lower()
    for hints, kind, explanation in DOMAIN_TYPES:
        if any(hint in domain_lower for hint in hints):
            return kind, explanation
    return DEFAULT_DOMAIN_TYPE
