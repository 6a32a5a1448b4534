"""Gene format constants, markers, and field names."""

# Total widths of the two supported layouts
COMPACT_BITS = 256
EXTENDED_BITS = 512

# Seasonal marker: when the xmas field holds this value, ambient part skins become xmas1
XMAS_MARKER = "010101010101"

# Body parts in the order they appear in the bit string
PART_TYPES = ("eyes", "mouth", "ears", "horn", "back", "tail")

# Part order used for output and scoring
OUTPUT_PART_TYPES = ("eyes", "ears", "horn", "mouth", "back", "tail")

# Part skin variants
SKIN_GLOBAL = "global"
SKIN_JAPAN = "japan"
SKIN_XMAS1 = "xmas1"
SKIN_XMAS2 = "xmas2"
SKIN_MYSTIC = "mystic"
SKIN_BIONIC = "bionic"

# Skin selector value meaning "use the ambient region/season skin"
AMBIENT = "ambient"

# Tag inferred in the extended layout from a bionic part
TAG_AGAMOGENESIS = "agamogenesis"
