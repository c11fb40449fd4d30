"""Built-in Kana vocabulary.

Each row is ``(kana, english_meanings, word_type)``. Meanings are listed in
priority order: the first non-bracketed meaning is the gloss used when
rendering Kana into English. Bracketed meanings such as ``[subject-marker]``
describe grammatical particles and are never offered as translations.

Rows are applied in order, so a later row wins when two rows share a Kana
word or an English meaning (``lape``, ``kasi``, ``mute``, ``wile`` and ``poka``
appear twice on purpose).
"""

KANA_VOCABULARY = [
    # Pronouns
    ("mi", ["i", "me", "we", "us"], "entity"),
    ("sina", ["you"], "entity"),
    ("ona", ["he", "she", "it", "they"], "entity"),

    # Beings and nature
    ("jan", ["person", "human", "people"], "entity"),
    ("kala", ["fish", "animal", "creature"], "entity"),
    ("kasi", ["plant", "tree", "nature", "vegetation"], "entity"),

    # Core qualities
    ("pona", ["good", "simple", "positive", "correct"], "quality"),
    ("ike", ["bad", "wrong", "negative", "complex"], "quality"),
    ("suli", ["big", "important", "long", "tall"], "quality"),
    ("lili", ["small", "little", "short", "young"], "quality"),
    ("wawa", ["strong", "powerful", "energy"], "quality"),
    ("mute", ["many", "much", "very", "a lot"], "quality"),

    # Core actions
    ("sona", ["know", "knowledge", "wisdom", "understand"], "action"),
    ("wile", ["want", "need", "desire", "wish"], "action"),
    ("ken", ["can", "able", "possible", "ability"], "action"),
    ("lukin", ["see", "look", "watch", "eye"], "action"),
    ("kute", ["hear", "listen", "ear"], "action"),
    ("toki", ["speak", "say", "talk", "communicate", "language"], "action"),
    ("pilin", ["feel", "think", "believe", "emotion", "heart"], "action"),
    ("moku", ["food", "eat", "consume"], "entity"),
    ("lape", ["sleep", "rest", "tired"], "action"),
    ("pali", ["do", "make", "create", "work"], "action"),
    ("tawa", ["go", "move", "to", "towards"], "action"),
    ("kama", ["come", "arrive", "become", "future"], "action"),
    ("awen", ["stay", "remain", "wait", "keep"], "action"),
    ("weka", ["remove", "away", "absent", "gone"], "action"),
    ("jo", ["have", "hold", "possess"], "action"),

    # Particles
    ("li", ["[subject-marker]"], "particle"),
    ("e", ["[object-marker]"], "particle"),
    ("pi", ["[modifier-marker]"], "particle"),
    ("la", ["if", "when", "[context-marker]"], "particle"),
    ("anu", ["or"], "particle"),
    ("en", ["and"], "particle"),
    ("se", ["what", "?", "[question-marker]"], "particle"),
    ("ala", ["no", "not", "none", "zero"], "quality"),
    ("kin", ["also", "too", "indeed"], "particle"),

    # Things and places
    ("ni", ["this", "that", "these", "those"], "entity"),
    ("ale", ["all", "everything", "universe", "life"], "entity"),
    ("ijo", ["thing", "something", "object"], "entity"),
    ("ma", ["land", "world", "place", "country", "earth"], "entity"),
    ("tomo", ["house", "building", "room", "home"], "entity"),
    ("ilo", ["tool", "device", "machine"], "entity"),
    ("pana", ["give", "send", "release", "emit"], "action"),
    ("olin", ["love", "affection", "respect", "care"], "action"),
    ("nasin", ["way", "method", "path", "road", "direction"], "entity"),
    ("tenpo", ["time", "period", "moment", "situation"], "entity"),

    # Elements
    ("suno", ["sun", "day", "light", "brightness"], "entity"),
    ("mun", ["moon", "night", "star"], "entity"),
    ("telo", ["water", "liquid", "fluid", "drink"], "entity"),
    ("kon", ["air", "wind", "breath", "spirit"], "entity"),
    ("seli", ["fire", "heat", "warm", "cook"], "entity"),
    ("lete", ["cold", "ice", "cool", "frozen"], "entity"),

    # Descriptions and colors
    ("akuta", ["truth", "real", "honest", "transparent"], "quality"),
    ("jaki", ["dirty", "gross", "contaminated"], "quality"),
    ("sin", ["new", "fresh", "another", "more"], "quality"),
    ("pini", ["done", "finished", "completed", "past", "end"], "quality"),
    ("kule", ["color", "colorful", "paint"], "quality"),
    ("walo", ["white", "light-colored", "pale"], "quality"),
    ("pimeja", ["black", "dark", "darkness"], "quality"),
    ("loje", ["red", "reddish"], "quality"),
    ("laso", ["blue", "green", "bluish"], "quality"),
    ("jelo", ["yellow", "yellowish"], "quality"),

    # Body and position
    ("luka", ["hand", "arm", "five", "touch"], "entity"),
    ("noka", ["foot", "leg", "walk", "bottom"], "entity"),
    ("monsi", ["back", "behind", "rear"], "entity"),
    ("sinpin", ["front", "face", "wall"], "entity"),
    ("sewi", ["up", "above", "high", "sky", "divine"], "quality"),
    ("anpa", ["down", "below", "low", "humble"], "quality"),
    ("insa", ["inside", "inner", "center", "stomach"], "entity"),
    ("poka", ["side", "next-to", "hip", "with"], "entity"),
    ("lon", ["located-at", "exist", "real", "true"], "action"),
    ("tan", ["from", "because-of", "origin", "cause"], "particle"),
    ("sama", ["same", "similar", "equal", "like"], "quality"),
    ("ante", ["different", "other", "changed"], "quality"),
    ("kepeken", ["use", "with", "using"], "action"),
    ("open", ["begin", "start", "open"], "action"),
    ("pan", ["grain", "bread", "rice", "cereal"], "entity"),
    ("esun", ["trade", "market", "buy", "sell", "shop"], "entity"),
    ("lape", ["sleep", "rest"], "action"),
    ("musi", ["fun", "play", "entertain", "art"], "action"),

    # Shapes and objects
    ("uta", ["mouth", "lips"], "entity"),
    ("nena", ["bump", "hill", "mountain", "nose"], "entity"),
    ("linja", ["long", "rope", "hair", "line"], "entity"),
    ("palisa", ["stick", "rod", "long-object"], "entity"),
    ("lupa", ["hole", "door", "window", "opening"], "entity"),
    ("lipu", ["paper", "book", "document", "flat"], "entity"),
    ("kiwen", ["hard", "solid", "stone", "metal"], "quality"),
    ("ko", ["soft", "clay", "semisolid", "paste"], "quality"),
    ("namako", ["spice", "extra", "additional", "flavor"], "entity"),
    ("oko", ["eye", "vision"], "entity"),
    ("melome", ["woman", "female", "feminine"], "entity"),
    ("mije", ["man", "male", "masculine"], "entity"),
    ("kasi", ["plant", "leaf", "herb", "grow"], "entity"),
    ("sike", ["circle", "round", "ball", "cycle"], "entity"),
    ("len", ["cloth", "clothing", "fabric", "cover"], "entity"),
    ("unpa", ["sexual", "marriage", "intimate"], "action"),
    ("pakala", ["break", "damage", "destroy", "mistake"], "action"),
    ("selo", ["outer", "skin", "surface", "boundary"], "entity"),
    ("leko", ["square", "block", "corner"], "entity"),
    ("lanpan", ["take", "get", "receive", "grab"], "action"),

    # Numbers
    ("wan", ["one", "unique", "unite"], "number"),
    ("tu", ["two", "split", "divide"], "number"),
    ("mute", ["many", "several", "much", "quantity"], "number"),
    ("nanpa", ["number", "order", "th"], "number"),

    # Late additions
    ("lawa", ["head", "lead", "control", "main", "ruler"], "entity"),
    ("kipisi", ["split", "cut", "divide", "slice"], "action"),
    ("monsuta", ["fear", "monster", "danger", "scary"], "quality"),
    ("tonsili", ["health", "wellness", "safe"], "quality"),
    ("meso", ["medium", "average", "middle"], "quality"),
    ("jami", ["tasty", "delicious", "yummy"], "quality"),
    ("suwi", ["sweet", "cute", "candy", "sugar"], "quality"),
    ("wile", ["want", "need", "must", "should"], "action"),
    ("kijetesantakalu", ["raccoon", "ferret", "mustelid"], "entity"),
    ("yu", ["hello", "greeting", "hi"], "particle"),
    ("poka", ["friend", "companion", "together"], "entity"),
]
