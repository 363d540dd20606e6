"""Built-in career catalog for the Indian job market.

Raw reference data only; ``career_catalog.load_catalog`` validates it into
``CareerDefinition`` models. Category order and entry order are significant:
they define the flattened iteration order used for tie-breaking.
"""

CAREER_PATHS: dict[str, list[dict]] = {
    "technology": [
        {
            "title": "Software Developer",
            "description": "Create applications, websites, and software solutions",
            "required_skills": ["Programming", "Problem Solving", "Database Management", "Version Control"],
            "education_paths": ["Computer Science", "Information Technology", "Software Engineering"],
            "salary_range": "₹4-15 LPA",
            "growth_rate": "23%",
            "top_employers": ["TCS", "Infosys", "Google", "Microsoft", "Amazon"],
            "key_locations": ["Bangalore", "Hyderabad", "Pune", "Chennai", "Mumbai"],
        },
        {
            "title": "Data Scientist",
            "description": "Analyze complex data to help businesses make decisions",
            "required_skills": ["Python/R", "Statistics", "Machine Learning", "Data Visualization"],
            "education_paths": ["Statistics", "Computer Science", "Mathematics", "Analytics"],
            "salary_range": "₹6-25 LPA",
            "growth_rate": "35%",
            "top_employers": ["Flipkart", "Ola", "Paytm", "Adobe", "IBM"],
            "key_locations": ["Bangalore", "Mumbai", "Delhi", "Pune", "Chennai"],
        },
        {
            "title": "DevOps Engineer",
            "description": "Bridge development and operations for efficient software delivery",
            "required_skills": ["Cloud Platforms", "Docker", "Kubernetes", "CI/CD", "Automation"],
            "education_paths": ["Computer Science", "Information Technology"],
            "salary_range": "₹5-20 LPA",
            "growth_rate": "30%",
            "top_employers": ["Amazon", "Microsoft", "Zomato", "Swiggy", "PayPal"],
            "key_locations": ["Bangalore", "Hyderabad", "Pune", "Mumbai", "Delhi"],
        },
    ],
    "healthcare": [
        {
            "title": "Medical Doctor",
            "description": "Diagnose and treat patients, promote health and wellness",
            "required_skills": ["Medical Knowledge", "Communication", "Empathy", "Critical Thinking"],
            "education_paths": ["MBBS", "MD/MS Specialization"],
            "salary_range": "₹6-50 LPA",
            "growth_rate": "15%",
            "top_employers": ["AIIMS", "Apollo", "Fortis", "Max Healthcare", "Private Practice"],
            "key_locations": ["Delhi", "Mumbai", "Chennai", "Bangalore", "Kolkata"],
        },
        {
            "title": "Physiotherapist",
            "description": "Help patients recover from injuries and improve mobility",
            "required_skills": ["Anatomy", "Manual Therapy", "Exercise Prescription", "Patient Care"],
            "education_paths": ["BPT", "MPT"],
            "salary_range": "₹3-12 LPA",
            "growth_rate": "20%",
            "top_employers": ["Hospitals", "Sports Clubs", "Rehabilitation Centers", "Private Practice"],
            "key_locations": ["Mumbai", "Delhi", "Bangalore", "Pune", "Chennai"],
        },
    ],
    "business": [
        {
            "title": "Digital Marketing Manager",
            "description": "Develop and execute online marketing strategies",
            "required_skills": ["SEO/SEM", "Social Media", "Analytics", "Content Strategy"],
            "education_paths": ["Marketing", "Business", "Communications", "Any Graduate + Certification"],
            "salary_range": "₹4-18 LPA",
            "growth_rate": "25%",
            "top_employers": ["Byju's", "Unacademy", "Zomato", "OYO", "Digital Agencies"],
            "key_locations": ["Mumbai", "Bangalore", "Delhi", "Pune", "Hyderabad"],
        },
        {
            "title": "Product Manager",
            "description": "Lead product development from conception to launch",
            "required_skills": ["Strategy", "Analytics", "User Research", "Project Management"],
            "education_paths": ["Engineering", "MBA", "Business", "Any Graduate + Experience"],
            "salary_range": "₹8-35 LPA",
            "growth_rate": "19%",
            "top_employers": ["Flipkart", "Amazon", "Paytm", "Ola", "Swiggy"],
            "key_locations": ["Bangalore", "Mumbai", "Delhi", "Hyderabad", "Pune"],
        },
    ],
    "creative": [
        {
            "title": "UI/UX Designer",
            "description": "Design user interfaces and experiences for digital products",
            "required_skills": ["Design Tools", "User Research", "Prototyping", "Visual Design"],
            "education_paths": ["Design", "Fine Arts", "Psychology", "Any Graduate + Portfolio"],
            "salary_range": "₹3-15 LPA",
            "growth_rate": "22%",
            "top_employers": ["Zomato", "Swiggy", "Paytm", "Adobe", "Design Studios"],
            "key_locations": ["Bangalore", "Mumbai", "Delhi", "Pune", "Chennai"],
        },
        {
            "title": "Content Writer",
            "description": "Create engaging content for websites, blogs, and marketing",
            "required_skills": ["Writing", "SEO", "Research", "Content Strategy"],
            "education_paths": ["English", "Journalism", "Communications", "Any Graduate"],
            "salary_range": "₹2-10 LPA",
            "growth_rate": "18%",
            "top_employers": ["Media Houses", "Digital Agencies", "Startups", "Freelance"],
            "key_locations": ["Mumbai", "Delhi", "Bangalore", "Pune", "Chennai"],
        },
    ],
}

# Skill groupings offered by the discovery survey
SKILL_CATEGORIES: dict[str, list[str]] = {
    "technical": ["Programming", "Data Analysis", "Cloud Computing", "Machine Learning", "Cybersecurity", "Database Management"],
    "creative": ["Design", "Writing", "Photography", "Video Editing", "Graphic Design", "UI/UX"],
    "business": ["Strategy", "Marketing", "Sales", "Project Management", "Analytics", "Finance"],
    "communication": ["Public Speaking", "Writing", "Presentation", "Negotiation", "Team Leadership"],
    "analytical": ["Problem Solving", "Critical Thinking", "Research", "Statistics", "Data Interpretation"],
}
