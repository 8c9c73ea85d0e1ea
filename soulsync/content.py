"""
Static content tables for the SoulSync companion.

Keyword lists, canned replies, suggestion cards and recommendation bundles
live here as plain data so the logic modules stay free of copy.
"""

from .models import MoodLabel

# Checked before anything else; a hit always means crisis.
CRISIS_KEYWORDS: tuple[str, ...] = (
    "suicide",
    "kill myself",
    "end it all",
    "hurt myself",
    "self harm",
    "die",
    "killing",
)

# Order matters: keywords overlap between categories and the first hit wins.
MOOD_KEYWORDS: tuple[tuple[MoodLabel, tuple[str, ...]], ...] = (
    (
        MoodLabel.SAD,
        (
            "sad",
            "depressed",
            "down",
            "upset",
            "crying",
            "lonely",
            "empty",
            "hopeless",
            "worthless",
        ),
    ),
    (
        MoodLabel.ANXIOUS,
        (
            "anxious",
            "worried",
            "nervous",
            "panic",
            "scared",
            "afraid",
            "stress",
            "overwhelmed",
        ),
    ),
    (
        MoodLabel.STRESSED,
        ("stressed", "overwhelmed", "pressure", "busy", "exhausted", "tired"),
    ),
    (
        MoodLabel.ANGRY,
        ("angry", "mad", "furious", "annoyed", "frustrated", "hate"),
    ),
    (
        MoodLabel.HAPPY,
        ("happy", "good", "great", "amazing", "excited", "joy", "wonderful"),
    ),
    (
        MoodLabel.TIRED,
        ("tired", "sleepy", "exhausted", "drained", "worn out", "fatigued"),
    ),
)

WELCOME_MESSAGE = (
    "Hey there! I'm Panda, your AI mental health companion from SoulSync. "
    "This is a completely safe and private space where you can share anything "
    "on your mind. I can help you with mood-adaptive music suggestions, creative "
    "activities, mindfulness practices, and gentle guidance. "
    "How are you feeling today?"
)

CONNECTION_TROUBLE_MESSAGE = (
    "I'm having trouble connecting right now, but I'm still here for you. "
    "Please try again in a moment. If you're in crisis, please reach out to a "
    "professional helpline immediately."
)

PROMPT_TEMPLATE = """You are Panda, SoulSync's caring mental health AI companion for Gen Z. The user just said: "{text}"

Their detected mood seems to be: {mood}

Provide a warm, empathetic response that:
- Uses Gen Z language naturally (not forced)
- Offers genuine emotional support
- Suggests specific creative activities, mindfulness practices, or journaling prompts
- Includes music recommendations when appropriate (especially for sad/tired moods)
- Shows you truly care about their wellbeing
- Keeps responses conversational (2-3 sentences max)
- Use emojis sparingly and meaningfully
- Be authentic and never judgmental

This is a safe space. Focus on practical, immediate help they can use right now."""

# Each entry: (message, is_crisis, music suggestions)
RESPONSE_TEMPLATES: dict[MoodLabel, tuple[str, bool, tuple[str, ...] | None]] = {
    MoodLabel.CRISIS: (
        """I'm really concerned about you right now, and I want you to know that you're not alone. Your life has value, and there are people who want to help. Please reach out to a professional immediately - they have the training to support you through this.

🚨 **Immediate Help:**
• National Suicide Prevention: 988 (US)
• Crisis Text Line: Text HOME to 741741
• Vandrevala Foundation: 9999 666 555 (India)

Would you like me to help you find more local resources, or would you prefer to talk about what's making you feel this way? I'm here to listen. 💜""",
        True,
        None,
    ),
    MoodLabel.SAD: (
        """I can hear the sadness in your words, and I want you to know that it's okay to feel this way. Your emotions are valid. 💙

Here are some things that might help:
🎵 **Music Therapy**: I'd love to suggest some uplifting songs - "Here Comes the Sun" by The Beatles or "Good as Hell" by Lizzo can be mood-boosters
✨ **Creative outlet**: Try writing down three small things you're grateful for today
🧘 **Mindfulness**: Take 5 deep breaths with me - in for 4, hold for 4, out for 6

What sounds most appealing to you right now?""",
        False,
        (
            "Here Comes the Sun - The Beatles",
            "Good as Hell - Lizzo",
            "Happy - Pharrell Williams",
        ),
    ),
    MoodLabel.TIRED: (
        """It sounds like you're feeling drained. Sometimes our souls need rest just as much as our bodies. 😴💜

Let me suggest some gentle ways to recharge:
🎵 **Calming Music**: "Weightless" by Marconi Union or "Clair de Lune" by Debussy
🛁 **Self-care**: A warm bath with calming music or a short meditation
📱 **Digital break**: Maybe 30 minutes away from screens?
☕ **Comfort ritual**: Make your favorite warm drink mindfully

What would help you feel more rested?""",
        False,
        (
            "Weightless - Marconi Union",
            "Clair de Lune - Debussy",
            "River - Joni Mitchell",
        ),
    ),
    MoodLabel.ANXIOUS: (
        """I can sense you're feeling anxious. Let's work through this together - you're stronger than you know. 🌸

Here are some techniques that can help right now:
🎵 **Calming sounds**: "Breathe Me" by Sia or nature sounds like rain/ocean waves
🧘 **Breathing**: Try the 4-7-8 technique - breathe in for 4, hold for 7, out for 8
✍️ **Journaling prompt**: "What's one thing I can control in this situation?"
🎨 **Creative distraction**: Doodle, color, or sketch your feelings

Which of these feels most doable for you?""",
        False,
        (
            "Breathe Me - Sia",
            "The Night We Met - Lord Huron",
            "Holocene - Bon Iver",
        ),
    ),
    MoodLabel.HAPPY: (
        """I love hearing the positivity in your message! Your joy is contagious. 😊✨

Let's amplify these good vibes:
🎵 **Upbeat music**: "Can't Stop the Feeling" by Justin Timberlake or "Walking on Sunshine" by Katrina and the Waves
📝 **Gratitude journaling**: Write down what's making you happy today
🤝 **Share the joy**: Maybe message a friend or family member to spread the positivity
💃 **Movement**: Dance to your favorite song or take a joyful walk

What's bringing you the most happiness today?""",
        False,
        (
            "Can't Stop the Feeling - Justin Timberlake",
            "Walking on Sunshine - Katrina and the Waves",
            "Happy - Pharrell Williams",
        ),
    ),
}

DEFAULT_RESPONSE: tuple[str, bool, tuple[str, ...] | None] = (
    """Thanks for sharing with me. I'm here to listen and support you in whatever way feels helpful. 🐼💜

Would you like me to suggest:
🎵 **Music** to match or shift your mood?
✨ **A creative activity** like journaling or drawing?
🧘 **Mindfulness practice** to help you feel more grounded?
📱 **Connection ideas** to reach out to someone you care about?

What sounds most appealing to you right now?""",
    False,
    None,
)

# Quick suggestion cards shown under the chat: (title, suggestions)
MOOD_SUGGESTIONS: dict[MoodLabel, tuple[str, tuple[str, ...]]] = {
    MoodLabel.SAD: (
        "Feeling down? Let's lift your spirits 🌈",
        (
            "Listen to uplifting music",
            "Try journaling your thoughts",
            "Make your favorite warm drink",
        ),
    ),
    MoodLabel.ANXIOUS: (
        "Let's calm those nerves together 🌸",
        (
            "Try 5-minute breathing exercise",
            "Play calming nature sounds",
            "Ground yourself with tea",
        ),
    ),
    MoodLabel.STRESSED: (
        "Time to decompress 🌿",
        ("5-minute meditation", "Lo-fi study beats", "Write down your worries"),
    ),
    MoodLabel.HAPPY: (
        "Love the positive vibes! ✨",
        (
            "Dance to your favorite song",
            "Write about what made you happy",
            "Share the joy with a friend",
        ),
    ),
}

# Task focus by most recent logged mood: (focus, activities)
RECOMMENDATIONS: dict[str, tuple[str, tuple[str, ...]]] = {
    "sad": (
        "Gentle mood lifting activities",
        ("Creative expression", "Gentle movement", "Connection with others"),
    ),
    "anxious": (
        "Calming and grounding practices",
        ("Mindfulness meditation", "Breathing exercises", "Progressive relaxation"),
    ),
    "stressed": (
        "Stress reduction and relaxation",
        ("Time management", "Physical exercise", "Mindful breaks"),
    ),
    "happy": (
        "Maintaining positive momentum",
        ("Gratitude practice", "Social connection", "Creative pursuits"),
    ),
    "neutral": (
        "General wellness building",
        ("Habit building", "Learning new skills", "Self-care routines"),
    ),
}

SPECIALTIES: tuple[str, ...] = (
    "all",
    "anxiety",
    "depression",
    "trauma",
    "relationships",
    "addiction",
    "eating disorders",
    "adhd",
    "family therapy",
    "couples therapy",
    "stress management",
)

# Task templates for recommended activities: (category, description, minutes)
ACTIVITY_TASKS: dict[str, tuple[str, str, int]] = {
    "Creative expression": (
        "creative",
        "Spend a few minutes drawing, writing or making music about how you feel.",
        20,
    ),
    "Gentle movement": (
        "physical",
        "Take a slow walk or do some light stretching.",
        15,
    ),
    "Connection with others": (
        "social",
        "Message or call someone you trust, just to say hi.",
        10,
    ),
    "Mindfulness meditation": (
        "mindfulness",
        "Sit comfortably and follow your breath for a short guided meditation.",
        10,
    ),
    "Breathing exercises": (
        "mindfulness",
        "Try the 4-7-8 technique: in for 4, hold for 7, out for 8. Repeat 4 times.",
        5,
    ),
    "Progressive relaxation": (
        "self_care",
        "Tense and release each muscle group from your toes up to your face.",
        15,
    ),
    "Time management": (
        "learning",
        "List today's tasks and pick the three that matter most.",
        10,
    ),
    "Physical exercise": (
        "physical",
        "Get your heart rate up with a brisk walk, a run or a dance break.",
        30,
    ),
    "Mindful breaks": (
        "mindfulness",
        "Step away from your screen and notice five things around you.",
        5,
    ),
    "Gratitude practice": (
        "mindfulness",
        "Write down three things you're grateful for today.",
        5,
    ),
    "Social connection": (
        "social",
        "Share something good from your day with a friend or family member.",
        15,
    ),
    "Creative pursuits": (
        "creative",
        "Pick up a hobby project you enjoy and give it some time.",
        30,
    ),
    "Habit building": (
        "self_care",
        "Choose one small healthy habit and do it now.",
        10,
    ),
    "Learning new skills": (
        "learning",
        "Watch a short tutorial or read an article on something new.",
        20,
    ),
    "Self-care routines": (
        "self_care",
        "Make your favorite warm drink and enjoy it without your phone.",
        15,
    ),
}

TASK_CATEGORIES: tuple[str, ...] = (
    "all",
    "mindfulness",
    "physical",
    "creative",
    "social",
    "learning",
    "self_care",
)

BLOG_CATEGORIES: tuple[str, ...] = (
    "all",
    "mental_health",
    "wellness",
    "lifestyle",
    "research",
    "stories",
    "tips",
)

# Sample posts for an empty blog: (title, slug, excerpt, author, tags, category, minutes, content)
SAMPLE_POSTS: tuple[tuple[str, str, str, str, tuple[str, ...], str, int, str], ...] = (
    (
        "Understanding Gen Z's Mental Health Crisis: What You Need to Know",
        "gen-z-mental-health-crisis",
        "Dive deep into the unique mental health challenges facing Gen Z and "
        "discover evidence-based strategies for building resilience in an "
        "increasingly connected yet isolating world.",
        "Dr. Sarah Mitchell",
        ("mental health", "gen z", "research", "anxiety", "depression"),
        "mental_health",
        8,
        """# Understanding Gen Z's Mental Health Crisis

Gen Z faces unprecedented mental health challenges. Born between 1997 and 2012, this generation has grown up with social media, experienced global uncertainty, and faces unique stressors that previous generations never encountered.

## Building Resilience
Research shows that Gen Z can build resilience through:
1. Digital detox practices
2. Mindfulness and meditation
3. Strong social connections
4. Professional support when needed
5. Creative expression and hobbies""",
    ),
    (
        "5 Science-Backed Strategies to Beat Social Media Anxiety",
        "beat-social-media-anxiety",
        "Learn how to maintain a healthy relationship with social media while "
        "protecting your mental health with these research-proven techniques.",
        "Marcus Thompson",
        ("social media", "anxiety", "digital wellness", "tips"),
        "tips",
        5,
        """# 5 Science-Backed Strategies to Beat Social Media Anxiety

Social media can be a double-edged sword for mental health. Here are proven strategies to help you use it mindfully.

1. Set intentional time boundaries
2. Curate your feed mindfully
3. Practice the 3-2-1 rule
4. Use positive engagement
5. Take regular digital detoxes

Remember: You control your social media experience. Make it work for your mental health, not against it.""",
    ),
    (
        "The Power of Micro-Meditation: 2-Minute Practices for Busy Lives",
        "micro-meditation-busy-lives",
        "Discover how short meditation practices can fit into your hectic "
        "schedule and provide immediate stress relief and mental clarity.",
        "Dr. Emily Chen",
        ("meditation", "mindfulness", "stress relief", "wellness"),
        "wellness",
        4,
        """# The Power of Micro-Meditation: 2-Minute Practices for Busy Lives

You don't need hours to meditate. These micro-practices can fit into any schedule and provide immediate benefits.

- The 4-7-8 breath (2 minutes)
- Body scan express (3 minutes)
- Gratitude moment (1 minute)
- Mindful sip (2 minutes)
- Walking meditation (5 minutes)

Small moments of mindfulness throughout your day can create significant positive changes in your mental health.""",
    ),
)
