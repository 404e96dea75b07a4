"""Static content of the public portfolio page."""

from __future__ import annotations

from dataclasses import dataclass, field

OWNER_NAME = "John Doe"
TAGLINE = "I build things for the web."
INTRO = (
    "I'm a software engineer specializing in building exceptional digital experiences. "
    "Currently, I'm focused on building accessible, human-centered products."
)
CONTACT_EMAIL = "john@example.com"

ABOUT_PARAGRAPHS = (
    "Hello! I'm a passionate software developer with a knack for creating intuitive and "
    "efficient digital solutions. My journey in tech began during university when I built "
    "my first web application, and I've been hooked ever since.",
    "Throughout my career, I've worked on diverse projects ranging from enterprise-level "
    "applications to innovative startups. I thrive in dynamic environments where I can "
    "leverage my technical skills to solve complex problems and deliver high-quality software.",
    "My approach to development is centered around creating clean, maintainable code that "
    "provides exceptional user experiences. I'm constantly expanding my knowledge and "
    "experimenting with new technologies to stay at the forefront of the industry.",
)

ABOUT_SKILLS = (
    "JavaScript (ES6+)",
    "TypeScript",
    "React",
    "Node.js",
    "Next.js",
    "Tailwind CSS",
    "Python",
    "RESTful APIs",
    "GraphQL",
    "SQL / NoSQL",
)


@dataclass(frozen=True)
class ProjectCard:
    title: str
    description: str
    technologies: tuple[str, ...]
    image: str
    github_url: str = "#"
    live_url: str = "#"


@dataclass(frozen=True)
class Job:
    company: str
    position: str
    duration: str
    highlights: tuple[str, ...] = field(default_factory=tuple)


PROJECTS = (
    ProjectCard(
        title="Enterprise Resource Planning System",
        description=(
            "A comprehensive ERP solution designed to streamline business operations. "
            "Features include inventory management, HR tools, and financial reporting dashboards."
        ),
        technologies=("React", "Node.js", "PostgreSQL", "Docker"),
        image="https://images.unsplash.com/photo-1461749280684-dccba630e2f6",
    ),
    ProjectCard(
        title="AI-Powered Analytics Platform",
        description=(
            "A machine learning platform that analyzes business data to provide actionable "
            "insights. Built with scalability in mind to handle large datasets efficiently."
        ),
        technologies=("Python", "TensorFlow", "AWS", "React"),
        image="https://images.unsplash.com/photo-1488590528505-98d2b5aba04b",
    ),
    ProjectCard(
        title="Secure Authentication Microservice",
        description=(
            "A robust authentication service implementing OAuth 2.0 and JWT for secure user "
            "management across multiple applications."
        ),
        technologies=("Express.js", "MongoDB", "JWT", "Redis"),
        image="https://images.unsplash.com/photo-1531297484001-80022131f5a1",
    ),
)

JOBS = (
    Job(
        company="Tech Innovations Inc",
        position="Senior Software Engineer",
        duration="Jan 2022 - Present",
        highlights=(
            "Lead development of a microservices architecture that improved system "
            "scalability by 200%.",
            "Implemented CI/CD pipeline reducing deployment time by 70%.",
            "Mentored junior developers and conducted code reviews to ensure code quality.",
            "Architected and implemented RESTful APIs used by mobile and web clients.",
        ),
    ),
    Job(
        company="DataSphere Solutions",
        position="Full Stack Developer",
        duration="Mar 2018 - Dec 2021",
        highlights=(
            "Built responsive front-end interfaces using React and Redux.",
            "Developed backend services using Node.js and Express.",
            "Optimized database queries resulting in 40% performance improvement.",
            "Collaborated with UX designers to create intuitive user interfaces.",
        ),
    ),
    Job(
        company="CloudNexus",
        position="Software Developer",
        duration="Jun 2016 - Feb 2018",
        highlights=(
            "Developed and maintained cloud-based applications using AWS.",
            "Created automated testing scripts that reduced QA time by 35%.",
            "Participated in agile development cycles and sprint planning.",
            "Improved application security practices and implemented vulnerability scanning.",
        ),
    ),
    Job(
        company="StartUp Labs",
        position="Junior Developer",
        duration="Sep 2014 - May 2016",
        highlights=(
            "Assisted in development of web applications using JavaScript and PHP.",
            "Designed and implemented database schemas for various projects.",
            "Collaborated with senior developers to troubleshoot complex issues.",
            "Contributed to open-source projects to improve coding skills.",
        ),
    ),
)
