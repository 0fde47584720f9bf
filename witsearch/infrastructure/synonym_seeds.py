# witsearch/infrastructure/synonym_seeds.py

from typing import List, Tuple

from witsearch.domain.models import SynonymGroup


# (canonical name, synonyms, category)
SYNONYM_DATA: List[Tuple[str, List[str], str]] = [
    # ── Tools ──
    ("wrench", ["spanner", "adjustable wrench", "crescent wrench", "pipe wrench"], "tools"),
    ("pliers", ["grips", "needle-nose", "needle nose pliers", "lineman pliers", "channel locks", "slip joint pliers"], "tools"),
    ("screwdriver", ["driver", "phillips", "phillips head", "flathead", "flat head", "slotted"], "tools"),
    ("hammer", ["mallet", "sledge", "sledgehammer", "claw hammer", "ball peen", "ball pein"], "tools"),
    ("saw", ["handsaw", "hacksaw", "hand saw", "circular saw", "jigsaw", "reciprocating saw", "sawzall"], "tools"),
    ("drill", ["power drill", "cordless drill", "driver", "impact driver", "hammer drill", "drill driver"], "tools"),
    ("level", ["spirit level", "bubble level", "laser level", "torpedo level"], "tools"),
    ("tape measure", ["measuring tape", "tape", "ruler", "measure"], "tools"),
    ("utility knife", ["box cutter", "razor knife", "stanley knife", "exacto knife", "x-acto"], "tools"),
    ("socket set", ["socket wrench", "ratchet set", "ratchet", "socket", "sockets"], "tools"),
    ("allen wrench", ["hex key", "allen key", "hex wrench", "l-key"], "tools"),
    ("pry bar", ["crowbar", "crow bar", "wrecking bar", "jimmy bar", "nail puller"], "tools"),
    ("chisel", ["wood chisel", "cold chisel", "masonry chisel"], "tools"),
    ("file", ["rasp", "metal file", "wood file", "bastard file"], "tools"),
    ("clamp", ["c-clamp", "c clamp", "bar clamp", "pipe clamp", "spring clamp", "vise grip"], "tools"),
    ("vise", ["vice", "bench vise", "bench vice", "woodworking vise"], "tools"),
    ("sander", ["orbital sander", "belt sander", "palm sander", "random orbit sander"], "tools"),
    ("grinder", ["angle grinder", "bench grinder", "die grinder", "disc grinder"], "tools"),
    ("router", ["wood router", "palm router", "plunge router", "trim router"], "tools"),
    ("plane", ["hand plane", "block plane", "jack plane", "smoothing plane"], "tools"),
    ("square", ["framing square", "speed square", "combination square", "try square", "carpenter square"], "tools"),

    # ── Hardware ──
    ("screw", ["wood screw", "machine screw", "drywall screw", "deck screw", "lag screw"], "hardware"),
    ("bolt", ["machine bolt", "carriage bolt", "hex bolt", "lag bolt", "anchor bolt"], "hardware"),
    ("nail", ["brad", "tack", "finishing nail", "common nail", "framing nail", "brad nail"], "hardware"),
    ("nut", ["hex nut", "lock nut", "wing nut", "cap nut", "coupling nut"], "hardware"),
    ("washer", ["flat washer", "lock washer", "fender washer", "spacer"], "hardware"),
    ("bracket", ["brace", "angle bracket", "corner bracket", "shelf bracket", "l-bracket"], "hardware"),
    ("hinge", ["door hinge", "cabinet hinge", "piano hinge", "butt hinge", "strap hinge"], "hardware"),
    ("hook", ["cup hook", "ceiling hook", "s-hook", "j-hook", "coat hook"], "hardware"),
    ("anchor", ["wall anchor", "drywall anchor", "toggle bolt", "molly bolt", "expansion anchor"], "hardware"),
    ("chain", ["link chain", "proof chain", "jack chain"], "hardware"),
    ("cable", ["wire cable", "steel cable", "aircraft cable"], "hardware"),
    ("rope", ["cord", "twine", "string", "paracord", "nylon rope", "manila rope"], "hardware"),

    # ── Plumbing ──
    ("pipe", ["tubing", "tube", "pvc pipe", "copper pipe", "pex"], "plumbing"),
    ("fitting", ["pipe fitting", "connector", "coupling", "adapter", "reducer"], "plumbing"),
    ("elbow", ["90 degree elbow", "45 degree elbow", "pipe elbow", "street elbow"], "plumbing"),
    ("tee", ["t-fitting", "pipe tee", "tee fitting"], "plumbing"),
    ("valve", ["shutoff valve", "ball valve", "gate valve", "check valve", "stop valve"], "plumbing"),
    ("faucet", ["tap", "spigot", "kitchen faucet", "bathroom faucet", "sink faucet"], "plumbing"),
    ("washer", ["faucet washer", "hose washer", "rubber washer", "o-ring"], "plumbing"),
    ("tape", ["teflon tape", "plumber tape", "thread tape", "ptfe tape"], "plumbing"),
    ("plunger", ["toilet plunger", "sink plunger", "cup plunger", "flange plunger"], "plumbing"),
    ("snake", ["drain snake", "auger", "drain auger", "plumber snake"], "plumbing"),

    # ── Electrical ──
    ("wire", ["electrical wire", "romex", "cable", "conductor", "wiring"], "electrical"),
    ("outlet", ["receptacle", "plug", "socket", "electrical outlet", "power outlet"], "electrical"),
    ("switch", ["light switch", "toggle switch", "dimmer", "dimmer switch", "wall switch"], "electrical"),
    ("breaker", ["circuit breaker", "fuse", "gfci", "gfi", "ground fault"], "electrical"),
    ("wire nut", ["wire connector", "marrette", "twist connector", "wire cap"], "electrical"),
    ("junction box", ["j-box", "electrical box", "outlet box", "switch box"], "electrical"),
    ("conduit", ["emt", "electrical conduit", "pvc conduit", "flexible conduit"], "electrical"),
    ("bulb", ["light bulb", "lamp", "led bulb", "incandescent", "cfl"], "electrical"),
    ("battery", ["batteries", "cell", "rechargeable", "alkaline"], "electrical"),
    ("extension cord", ["power cord", "drop cord", "extension", "power strip"], "electrical"),

    # ── Paint ──
    ("paint", ["latex paint", "acrylic paint", "oil paint", "enamel", "primer"], "paint"),
    ("brush", ["paint brush", "paintbrush", "bristle brush", "chip brush"], "paint"),
    ("roller", ["paint roller", "roller cover", "nap roller", "foam roller"], "paint"),
    ("tape", ["painter tape", "masking tape", "blue tape", "frog tape"], "paint"),
    ("caulk", ["caulking", "sealant", "silicone", "latex caulk", "acrylic caulk"], "paint"),
    ("stain", ["wood stain", "deck stain", "gel stain", "penetrating stain"], "paint"),
    ("varnish", ["polyurethane", "poly", "lacquer", "shellac", "finish", "clear coat"], "paint"),
    ("sandpaper", ["sanding paper", "emery paper", "abrasive paper", "grit paper"], "paint"),
    ("putty", ["wood putty", "wood filler", "spackle", "spackling", "filler"], "paint"),
    ("thinner", ["paint thinner", "mineral spirits", "turpentine", "solvent", "acetone"], "paint"),

    # ── Building ──
    ("lumber", ["wood", "timber", "boards", "planks", "dimensional lumber", "2x4"], "building"),
    ("plywood", ["ply", "sheathing", "osb", "particle board", "mdf"], "building"),
    ("drywall", ["sheetrock", "gypsum board", "wallboard", "plasterboard"], "building"),
    ("insulation", ["fiberglass", "foam board", "spray foam", "batt insulation", "r-value"], "building"),
    ("concrete", ["cement", "mortar", "grout", "quickcrete", "sakrete"], "building"),
    ("rebar", ["reinforcing bar", "reinforcement", "steel bar"], "building"),
    ("flashing", ["roof flashing", "drip edge", "step flashing"], "building"),
    ("shingle", ["roofing shingle", "asphalt shingle", "roof tile"], "building"),
    ("siding", ["vinyl siding", "aluminum siding", "clapboard", "lap siding"], "building"),
    ("trim", ["molding", "moulding", "baseboard", "crown molding", "casing"], "building"),

    # ── Automotive ──
    ("oil", ["motor oil", "engine oil", "synthetic oil", "5w30", "10w30"], "automotive"),
    ("filter", ["oil filter", "air filter", "cabin filter", "fuel filter"], "automotive"),
    ("brake pad", ["brake pads", "brakes", "disc brake pad", "brake shoe"], "automotive"),
    ("spark plug", ["plug", "ignition plug", "spark plugs"], "automotive"),
    ("wiper", ["wiper blade", "windshield wiper", "wiper blades"], "automotive"),
    ("coolant", ["antifreeze", "radiator fluid", "engine coolant"], "automotive"),
    ("transmission fluid", ["atf", "trans fluid", "gear oil", "transmission oil"], "automotive"),
    ("headlight", ["headlamp", "head light", "bulb", "h11", "h7", "9005"], "automotive"),
    ("fuse", ["auto fuse", "blade fuse", "car fuse"], "automotive"),
    ("jumper cables", ["jumper cable", "booster cables", "jump leads"], "automotive"),

    # ── Garden ──
    ("shovel", ["spade", "digging shovel", "garden spade", "trenching shovel"], "garden"),
    ("rake", ["leaf rake", "garden rake", "bow rake", "thatch rake"], "garden"),
    ("hoe", ["garden hoe", "stirrup hoe", "dutch hoe", "warren hoe"], "garden"),
    ("trowel", ["hand trowel", "garden trowel", "transplanting trowel"], "garden"),
    ("pruner", ["pruning shears", "secateurs", "clippers", "hand pruner", "loppers"], "garden"),
    ("hose", ["garden hose", "water hose", "soaker hose", "sprinkler hose"], "garden"),
    ("sprinkler", ["lawn sprinkler", "oscillating sprinkler", "impact sprinkler"], "garden"),
    ("fertilizer", ["plant food", "compost", "manure", "mulch", "soil amendment"], "garden"),
    ("weed killer", ["herbicide", "roundup", "weed control", "weed spray"], "garden"),
    ("insecticide", ["bug spray", "pesticide", "pest control", "insect killer"], "garden"),

    # ── Food ──
    ("soda", ["pop", "cola", "soft drink", "coke", "carbonated drink"], "food"),
    ("chips", ["crisps", "potato chips", "tortilla chips", "snack chips"], "food"),
    ("pasta", ["noodles", "spaghetti", "macaroni", "penne", "fettuccine"], "food"),
    ("sauce", ["pasta sauce", "marinara", "tomato sauce", "red sauce"], "food"),
    ("rice", ["white rice", "brown rice", "jasmine rice", "basmati"], "food"),
    ("beans", ["canned beans", "black beans", "pinto beans", "kidney beans"], "food"),
    ("soup", ["broth", "stock", "canned soup", "bouillon"], "food"),
    ("cereal", ["breakfast cereal", "oatmeal", "granola", "corn flakes"], "food"),
    ("bread", ["loaf", "sliced bread", "baguette", "rolls"], "food"),
    ("flour", ["all-purpose flour", "wheat flour", "bread flour", "self-rising"], "food"),
    ("sugar", ["granulated sugar", "white sugar", "brown sugar", "powdered sugar"], "food"),
    ("butter", ["margarine", "spread", "salted butter", "unsalted butter"], "food"),
    ("milk", ["whole milk", "2% milk", "skim milk", "dairy"], "food"),
    ("cheese", ["cheddar", "american cheese", "swiss", "mozzarella", "parmesan"], "food"),
    ("eggs", ["egg", "dozen eggs", "large eggs"], "food"),

    # ── Household ──
    ("trash bags", ["garbage bags", "bin liners", "refuse bags", "waste bags"], "household"),
    ("paper towels", ["paper towel", "kitchen roll", "kitchen towels"], "household"),
    ("toilet paper", ["tp", "toilet tissue", "bath tissue", "bathroom tissue"], "household"),
    ("detergent", ["laundry detergent", "laundry soap", "washing powder", "dish soap"], "household"),
    ("bleach", ["chlorine bleach", "clorox", "disinfectant"], "household"),
    ("cleaner", ["all-purpose cleaner", "surface cleaner", "cleaning spray", "windex"], "household"),
    ("sponge", ["scrubber", "dish sponge", "scrub brush", "scouring pad"], "household"),
    ("mop", ["floor mop", "swiffer", "wet mop", "string mop"], "household"),
    ("broom", ["push broom", "corn broom", "angle broom"], "household"),
    ("vacuum", ["vacuum cleaner", "hoover", "shop vac", "upright vacuum"], "household"),

    # ── Office ──
    ("pen", ["ballpoint", "ink pen", "writing pen", "bic"], "office"),
    ("pencil", ["mechanical pencil", "lead pencil", "graphite pencil"], "office"),
    ("marker", ["sharpie", "highlighter", "felt tip", "permanent marker"], "office"),
    ("tape", ["scotch tape", "clear tape", "packing tape", "masking tape"], "office"),
    ("stapler", ["staple gun", "staples", "desk stapler"], "office"),
    ("scissors", ["shears", "cutting scissors", "paper scissors"], "office"),
    ("paper", ["copy paper", "printer paper", "notebook", "notepad"], "office"),
    ("folder", ["file folder", "manila folder", "binder", "portfolio"], "office"),
    ("envelope", ["mailer", "mailing envelope", "letter envelope"], "office"),
    ("clip", ["paper clip", "binder clip", "bulldog clip", "clamp"], "office"),

    # ── Safety ──
    ("gloves", ["work gloves", "latex gloves", "nitrile gloves", "safety gloves"], "safety"),
    ("goggles", ["safety glasses", "eye protection", "protective eyewear"], "safety"),
    ("mask", ["dust mask", "respirator", "n95", "face mask", "breathing mask"], "safety"),
    ("earplugs", ["ear plugs", "ear protection", "ear muffs", "hearing protection"], "safety"),
    ("hard hat", ["helmet", "safety helmet", "bump cap", "head protection"], "safety"),
    ("vest", ["safety vest", "hi-vis vest", "reflective vest", "high visibility"], "safety"),
    ("first aid kit", ["first aid", "medical kit", "emergency kit"], "safety"),
    ("fire extinguisher", ["extinguisher", "abc extinguisher"], "safety"),
]


def seed_groups() -> List[SynonymGroup]:
    return [
        SynonymGroup.create(canonical, synonyms, category=category, is_system=True)
        for canonical, synonyms, category in SYNONYM_DATA
    ]
