"""Catalog of stored job roles with their declared required skills.

Each description mentions the role's stack in plain prose, so extracting
skills from it yields the declared list.
"""

from models.schemas.job_role import JobRole

JOB_ROLES: tuple[JobRole, ...] = (
    JobRole(
        id="data-analyst",
        title="Data Analyst",
        description=(
            "Turn raw data into reports and insights.\n"
            "- Python for analysis and scripting\n"
            "- Relational databases: MySQL and PostgreSQL\n"
            "- Version control with Git\n"
            "- REST API integrations with upstream data sources\n"
            "- JavaScript or TypeScript for dashboards"
        ),
        required_skills=["python", "mysql", "postgresql", "git", "rest api", "javascript", "typescript"],
    ),
    JobRole(
        id="ai-ml-engineer",
        title="AI/ML Engineer",
        description=(
            "Build, ship and serve models in production.\n"
            "- Python for model development\n"
            "- Docker and Kubernetes for deployment\n"
            "- AWS for training and serving\n"
            "- Git for version control\n"
            "- REST API design for model endpoints\n"
            "- PostgreSQL and MongoDB for feature stores"
        ),
        required_skills=["python", "docker", "kubernetes", "aws", "git", "rest api", "postgresql", "mongodb"],
    ),
    JobRole(
        id="frontend-developer",
        title="Frontend Developer",
        description=(
            "Build responsive, accessible web interfaces.\n"
            "- React with modern JavaScript and TypeScript\n"
            "- HTML, CSS and Tailwind for styling\n"
            "- Next.js for server rendering\n"
            "- Git for version control"
        ),
        required_skills=["react", "javascript", "typescript", "html", "css", "tailwind", "next.js", "git"],
    ),
    JobRole(
        id="backend-developer",
        title="Backend Developer",
        description=(
            "Design and run scalable APIs and services.\n"
            "- Node.js with Express, or Python\n"
            "- MySQL, PostgreSQL and MongoDB\n"
            "- REST API design and implementation\n"
            "- Docker for local development and deployment\n"
            "- Git for version control"
        ),
        required_skills=["node.js", "express", "python", "mysql", "postgresql", "mongodb", "rest api", "docker", "git"],
    ),
    JobRole(
        id="full-stack-engineer",
        title="Full Stack Engineer",
        description=(
            "Own features end to end.\n"
            "- Frontend: React, JavaScript, TypeScript, HTML, CSS, Tailwind, Next.js\n"
            "- Backend: Node.js and Express\n"
            "- Databases: MongoDB and PostgreSQL\n"
            "- REST API design and consumption\n"
            "- Git for version control"
        ),
        required_skills=[
            "react", "node.js", "express", "mongodb", "postgresql", "rest api",
            "javascript", "typescript", "git", "html", "css", "tailwind", "next.js",
        ],
    ),
    JobRole(
        id="devops-engineer",
        title="DevOps Engineer",
        description=(
            "Own infrastructure, delivery and reliability.\n"
            "- AWS (EC2, Lambda, S3, EKS)\n"
            "- Docker and Kubernetes\n"
            "- Python for automation\n"
            "- Git for version control\n"
            "- REST API and system integrations\n"
            "- MySQL and PostgreSQL operations"
        ),
        required_skills=["aws", "docker", "kubernetes", "python", "git", "rest api", "mysql", "postgresql"],
    ),
    JobRole(
        id="database-engineer",
        title="Database Engineer",
        description=(
            "Design and maintain data systems.\n"
            "- MySQL and PostgreSQL\n"
            "- MongoDB for document stores\n"
            "- Python or Node.js for tooling\n"
            "- AWS managed databases\n"
            "- REST API data access layers\n"
            "- Git for schema and migration versioning"
        ),
        required_skills=["mysql", "postgresql", "mongodb", "python", "node.js", "aws", "rest api", "git"],
    ),
)

_ROLES_BY_ID = {role.id: role for role in JOB_ROLES}


def get_job_role(role_id: str) -> JobRole | None:
    return _ROLES_BY_ID.get(role_id)
