"""
Default website content, inserted section by section the first time the
content store is read while empty.
"""

DEFAULT_CONTENT = {
    "hero": {
        "announcement": {"text": "New AI Courses Available - Enroll Today!", "icon": "🚀"},
        "title": {"line1": "Building", "line2": "Tomorrow's", "line3": "Future Leaders"},
        "subtitle": (
            "Transform your career with cutting-edge professional training and technology "
            "solutions designed by industry experts for career excellence."
        ),
        "cta_buttons": {
            "primary": {"text": "Explore Training Programs", "url": "/training", "icon": "🚀"},
            "secondary": {"text": "Learn More About Us", "url": "/about", "icon": "📚"},
        },
        "stats": [
            {"icon": "🎓", "number": "10K+", "label": "Students Trained"},
            {"icon": "💼", "number": "95%", "label": "Job Placement"},
            {"icon": "🤝", "number": "50+", "label": "Industry Partners"},
            {"icon": "💡", "number": "24/7", "label": "Learning Support"},
        ],
        "scroll_text": "SCROLL TO EXPLORE",
    },
    "about": {
        "title": "About ArSa Nexus",
        "subtitle": "Leading the Future of Professional Development",
        "description": (
            "We are committed to providing world-class training and development solutions that "
            "empower individuals and organizations to achieve their full potential."
        ),
        "story": {
            "title": "Our Story",
            "paragraphs": [
                "Founded with a vision to bridge the gap between academic learning and industry requirements.",
                "Our journey began with a simple belief: everyone deserves access to quality education and training.",
                "Today we are a trusted partner for thousands of professionals seeking career transformation.",
            ],
        },
        "mission": "To empower individuals with cutting-edge skills and knowledge that drive career success and innovation.",
        "vision": "To be the global leader in professional development.",
        "values": [
            {"icon": "🎯", "title": "Excellence", "description": "We strive for excellence in everything we do."},
            {"icon": "🚀", "title": "Innovation", "description": "We embrace innovation and cutting-edge technologies."},
            {"icon": "🤝", "title": "Integrity", "description": "We maintain the highest standards of integrity."},
            {"icon": "💡", "title": "Growth", "description": "We foster continuous learning and growth."},
        ],
    },
    "services": {
        "title": "Our Services",
        "subtitle": "Comprehensive Solutions for Your Growth",
        "services": [
            {
                "icon": "💻",
                "title": "Web Development Training",
                "features": ["Frontend Development", "Backend APIs", "Database Management", "Deployment & DevOps"],
            },
            {
                "icon": "🤖",
                "title": "AI & Machine Learning",
                "features": ["Python Programming", "ML Algorithms", "Deep Learning", "AI Applications"],
            },
            {
                "icon": "📱",
                "title": "Mobile App Development",
                "features": ["React Native", "Flutter", "iOS Development", "Android Development"],
            },
            {
                "icon": "☁️",
                "title": "Cloud Computing",
                "features": ["AWS Services", "Azure Cloud", "Google Cloud", "DevOps Practices"],
            },
            {
                "icon": "🎨",
                "title": "UI/UX Design",
                "features": ["Design Thinking", "Figma/Adobe XD", "User Research", "Prototyping"],
            },
            {
                "icon": "📊",
                "title": "Data Analytics",
                "features": ["Data Visualization", "Statistical Analysis", "Business Intelligence", "Reporting Tools"],
            },
        ],
    },
    "training": {
        "title": "Training Programs",
        "subtitle": "Skill-Building Programs Designed for Success",
        "programs": [
            {
                "id": "web-dev",
                "title": "Web Development Bootcamp",
                "duration": "6 months",
                "level": "Beginner to Advanced",
                "price": "$2,999",
                "image": "/images/training/web-dev.jpg",
            },
            {
                "id": "ai-ml",
                "title": "AI & Machine Learning Program",
                "duration": "8 months",
                "level": "Intermediate to Advanced",
                "price": "$3,999",
                "image": "/images/training/ai-basics.jpg",
            },
            {
                "id": "mobile-dev",
                "title": "Mobile App Development",
                "duration": "5 months",
                "level": "Beginner to Intermediate",
                "price": "$2,499",
                "image": "/images/training/mobile-dev.jpg",
            },
            {
                "id": "ui-ux",
                "title": "UI/UX Design Mastery",
                "duration": "4 months",
                "level": "Beginner to Advanced",
                "price": "$1,999",
                "image": "/images/training/ui-ux.jpg",
            },
        ],
    },
    "testimonials": {
        "title": "Success Stories",
        "subtitle": "What Our Students Say About Their Journey",
        "testimonials": [
            {
                "id": 1,
                "name": "Sarah Johnson",
                "role": "Full-Stack Developer",
                "rating": 5,
                "text": "The web development bootcamp was intensive but incredibly rewarding.",
                "program": "Web Development Bootcamp",
            },
            {
                "id": 2,
                "name": "Michael Chen",
                "role": "AI Engineer",
                "rating": 5,
                "text": "The hands-on projects and mentorship prepared me for my current role.",
                "program": "AI & Machine Learning Program",
            },
        ],
    },
    "contact": {
        "title": "Get In Touch",
        "subtitle": "Ready to Transform Your Career?",
        "contact_info": {
            "email": {"label": "Email Us", "value": "info@arsanexus.com", "icon": "📧"},
            "phone": {"label": "Call Us", "value": "+1 (555) 123-4567", "icon": "📞"},
            "address": {"label": "Visit Us", "value": "123 Tech Street, Innovation City, IC 12345", "icon": "📍"},
            "hours": {"label": "Business Hours", "value": "Monday - Friday: 9 AM - 6 PM", "icon": "⏰"},
        },
        "form": {
            "title": "Send us a Message",
            "submit_button": "Send Message",
            "success_message": "Thank you! Your message has been sent successfully.",
        },
    },
    "footer": {
        "company": {
            "name": "ArSa Nexus LLC",
            "tagline": "Empowering Tomorrow's Leaders Today",
        },
        "quick_links": [
            {"text": "About Us", "url": "/about"},
            {"text": "Training Programs", "url": "/training"},
            {"text": "Contact", "url": "/contact"},
            {"text": "Blog", "url": "/blog"},
            {"text": "Careers", "url": "/careers"},
        ],
        "social_links": {
            "facebook": "https://facebook.com/arsanexus",
            "twitter": "https://twitter.com/arsanexus",
            "linkedin": "https://linkedin.com/company/arsanexus",
        },
        "copyright": "© ArSa Nexus LLC. All rights reserved.",
        "bottom_links": [
            {"text": "Privacy Policy", "url": "/privacy"},
            {"text": "Terms of Service", "url": "/terms"},
        ],
    },
    "navigation": {
        "logo": {"text": "ArSa Nexus", "tagline": "Professional Excellence"},
        "menu_items": [
            {"text": "Home", "url": "/"},
            {"text": "About", "url": "/about"},
            {"text": "Training", "url": "/training"},
            {"text": "Contact", "url": "/contact"},
            {"text": "Blog", "url": "/blog"},
        ],
        "cta_button": {"text": "Get Started", "url": "/training"},
    },
    "seo": {
        "global": {
            "site_name": "ArSa Nexus - Professional Training & Development",
            "default_title": "ArSa Nexus | Transform Your Career with Professional Training",
            "default_description": "Leading provider of professional training and development solutions.",
            "author": "ArSa Nexus LLC",
            "og_image": "/images/og-image.jpg",
        },
        "pages": {
            "home": {"title": "ArSa Nexus | Transform Your Career with Professional Training"},
            "about": {"title": "About ArSa Nexus | Leading Professional Development Provider"},
            "training": {"title": "Training Programs | Professional Development Courses - ArSa Nexus"},
        },
    },
}
