from __future__ import annotations

import re
from typing import List, Optional, Pattern, Tuple

# Catalogue order is the output order of extract_skills_from_description.
KNOWN_SKILLS: Tuple[str, ...] = (
    "Java", "JavaScript", "TypeScript", "Python", "Go", "Rust", "C++", "C#", "Ruby", "PHP", "Swift", "Kotlin",
    "React", "React Native", "Angular", "Vue", "Svelte", "Next.js", "Nuxt", "Node.js", "Express", "Django", "Flask",
    "Spring Boot", "Spring", ".NET", "ASP.NET", "Rails", "Laravel",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Jenkins", "CI/CD",
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB", "Cassandra",
    "Kafka", "RabbitMQ", "GraphQL", "REST", "gRPC", "Microservices",
    "HTML", "CSS", "Sass", "Tailwind", "Bootstrap",
    "Git", "Linux", "Agile", "Scrum", "Jira",
    "TensorFlow", "PyTorch", "Machine Learning", "Deep Learning", "NLP",
    "Figma", "Sketch", "UI/UX",
    "SQL", "NoSQL", "ETL", "Data Pipeline",
    "Firebase", "Supabase", "Auth0",
    "Nginx", "Apache", "Webpack", "Vite",
    "Jest", "Cypress", "Selenium", "Unit Testing",
    "OAuth", "JWT", "SSO",
)


def _skill_pattern(skill: str) -> Pattern[str]:
    # Word-ish boundaries that also hold for "C++", "C#" and ".NET":
    # no alphanumeric directly before or after the name.
    # e.g. "Java" must not fire inside "JavaScript", "Go" not inside "Google"
    return re.compile(rf"(?<![A-Za-z0-9]){re.escape(skill)}(?![A-Za-z0-9])", re.IGNORECASE)


_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = tuple((s, _skill_pattern(s)) for s in KNOWN_SKILLS)


def extract_skills_from_description(description: Optional[str]) -> List[str]:
    """
    Catalogue skills mentioned in a free-text job description.
    Used when a job record carries no explicit required-skills list.
    """
    if not description:
        return []
    return [skill for skill, pattern in _PATTERNS if pattern.search(description)]
