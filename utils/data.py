"""
Data Module - Literal portfolio content
Everything on the page is authored here; nothing is loaded or saved at runtime.
"""

from typing import NamedTuple, Optional
from flask import current_app


class ProjectCard(NamedTuple):
    title: str
    description: str
    image: str
    link: Optional[str] = None


PROFILE = {
    'name': 'Shambhav Kumar Rao',
    'greeting': "Hi! I'm Shambhav Kumar Rao 👋",
    'headline': 'Full Stack Developer & AI Enthusiast',
    'tagline': ('I build modern web apps, AI interfaces, and innovative tools to solve '
                'real-world problems. Let’s innovate together!'),
    'photo': 'https://i.ibb.co/XZVKVrGH/1000091460-removebg-preview.png',
    'email': 'rshambhavkumar@gmail.com',
    'resume': 'https://pdf.ac/2qKP9x',
}

SOCIAL = {
    'github': 'https://github.com/kumarshambhav/',
    'linkedin': 'https://www.linkedin.com/in/shambhav-kumar-rao-a62749241/',
    'instagram': 'https://www.instagram.com/__shambhav_?igsh=MWd1ZXphcTVmcnRnMA==',
}

PROJECTS = (
    ProjectCard(
        'CodeReview',
        'Enhanced Code quality through AI - driven Suggestions.',
        'https://i.ibb.co/1fMR1r88/pexels-markusspiske-2764993.jpg',
        'https://code-review-teal-six.vercel.app/',
    ),
    ProjectCard(
        'Instagram Clone',
        'A clone with post, like, comment & auth features.',
        'https://i.ibb.co/rGJRjwMp/deeksha-pahariya-PKJLZul-b-Ug-unsplash.jpg',
        'https://github.com/Kumarshambhav/Instaclone',
    ),
    ProjectCard(
        'ERA Montage',
        'Memory sharing website for MMMUT students.',
        'https://i.ibb.co/j9Yj5Y7z/karina-lago-w-Euc-G-s-LRs-Y-unsplash.jpg',
        'https://github.com/Kumarshambhav/eraMontage',
    ),
    ProjectCard(
        'Gemini Clone',
        'Google Gemini AI UI clone with conversation features.',
        'https://i.ibb.co/21snqhVC/solen-feyissa-Rwo-T2g5-SGRw-unsplash.jpg',
        'https://github.com/Kumarshambhav/gimini',
    ),
    ProjectCard(
        'Hostel Food Waste Reduction App',
        'Pre-book meals to reduce hostel food wastage. (In progress)',
        'https://i.ibb.co/hFzd58PW/shakib-uzzaman-htj6cvrbf7-A-unsplash.jpg',
    ),
    ProjectCard(
        'StartUpNest',
        'Co-living finder for startup folks in Bangalore. (In progress)',
        'https://i.ibb.co/zTFzk10y/antonio-cerbino-xx3-Fh-P88o5-Q-unsplash.jpg',
    ),
)

SKILLS = (
    'LangChain', 'RAG', 'HTML', 'CSS', 'JavaScript', 'ReactJs', 'NextJs',
    'Java', 'C++', 'MongoDB', 'MySQL', 'NodeJs', 'ExpressJs',
)

EDUCATION = (
    'B.Tech in Electronics and Communication Engineering (2021–2025) CGPA: 6.69/10',
)


def load_data():
    """
    Collect the portfolio content for the page template

    Returns:
        dict: Profile, social links, projects, skills and education
    """
    current_app.logger.debug(f"Loaded portfolio content: {len(PROJECTS)} projects, {len(SKILLS)} skills")
    return {
        **PROFILE,
        'social': dict(SOCIAL),
        'projects': list(PROJECTS),
        'skills': list(SKILLS),
        'education': list(EDUCATION),
    }


def get_global_meta():
    """Get default SEO meta tags"""
    return {
        'title': current_app.config.get('SITE_TITLE', PROFILE['name']),
        'description': current_app.config.get('SITE_DESCRIPTION', PROFILE['headline']),
        'keywords': ', '.join((PROFILE['name'],) + SKILLS[:6]),
    }
