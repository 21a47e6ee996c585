"""Solv brand style guide for image generation.

BRAND_STYLE is appended to every prompt (unless --no-brand) so generated
images stay visually consistent with Solv's identity. CONTENT_TYPE_STYLES
layers composition guidance for a specific use case on top of it.

Update this file whenever the brand evolves.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class ContentType(str, Enum):
    BLOG = "blog"
    SOCIAL = "social"
    HERO = "hero"
    EMAIL = "email"


BRAND_STYLE = """
Visual style: Graphic and illustrative design — not photography. Clean, composed, editorial.

Color palette:
- Dominant: Bold purple-to-magenta gradient backgrounds. Rich deep purple (#7B2FBE) transitions
  through violet to hot magenta/pink (#E91E8C). This gradient is the signature — it should feel
  warm and energetic, not neon or garish.
- Secondary: Pure white (#FFFFFF) for cards, content containers, and UI elements. White floats
  over the gradient to create contrast and breathing room.
- No cold blues, institutional grays, or clinical white backgrounds.

Typography treatment (when text or UI appears):
- Large, bold, confident headline type. Heavy-weight clean sans-serif — think modern, not techy.
- Strong hierarchy: big bold statement on top, lighter-weight supporting copy below.
- Text should feel confident and warm, not sterile.

Layout philosophy:
- Card-based UI elements floating over gradient backgrounds is the signature pattern.
- Product screenshots or UI elements are shown as polished "live" mockups — inside device frames
  or styled UI cards with subtle shadows. Never flat screenshots.
- Composition is editorial and deliberate. Generous whitespace. Nothing crammed.

Overall mood:
- Energetic but not chaotic. Warm and approachable, not clinical or cold.
- Modern healthcare tech that signals "we're different from legacy players" without being
  gimmicky or startup-cliché.
- The purple-magenta palette is what sets Solv apart from the cold blues and grays that
  dominate health tech. Lean into it.

Never use: generic SaaS aesthetics, stock photo styles, cold medical blues, corporate grays,
clipart-style illustrations, or overly literal healthcare imagery (stethoscopes, red crosses, etc.).
""".strip()


CONTENT_TYPE_STYLES: MappingProxyType[ContentType, str] = MappingProxyType({
    ContentType.BLOG: """
Format: 16:9 horizontal editorial header image.
Composition: Bold gradient background with a strong focal element — an abstract graphic,
a styled UI card, or a typographic treatment. Think magazine cover energy. Leave visual
breathing room on the left or right for headline text overlay if needed.
Avoid: cluttered layouts, too many elements competing for attention.
""".strip(),
    ContentType.SOCIAL: """
Format: Square (1:1) or 16:9 social card. Bold and thumb-stopping.
Composition: One dominant visual element centered over the gradient. Strong typographic
hierarchy if text is included. Should read instantly at small sizes — no fine detail.
Think: LinkedIn post card or Twitter/X header. High contrast, high confidence.
""".strip(),
    ContentType.HERO: """
Format: Wide 16:9 or ultrawide hero banner for a landing page.
Composition: Product UI elements or interface cards floating over the gradient background,
styled as polished live mockups in device frames. Editorial, spacious layout with room for
a headline on one side. Feels like a premium SaaS homepage — alive, not static.
""".strip(),
    ContentType.EMAIL: """
Format: 16:9 or 3:1 wide email header banner.
Composition: Clean and contained — one strong gradient background with a centered or
left-aligned graphic element. Simple enough to render well across email clients.
No fine text or intricate detail. Feels like the top of a well-designed newsletter.
""".strip(),
})

# Recommended aspect ratio when --type is given without --size.
# email asks for 3:1 in its copy but the API has no such ratio; 16:9 is closest.
CONTENT_TYPE_SIZES: MappingProxyType[ContentType, str] = MappingProxyType({
    ContentType.BLOG: "16:9",
    ContentType.SOCIAL: "1:1",
    ContentType.HERO: "16:9",
    ContentType.EMAIL: "16:9",
})
