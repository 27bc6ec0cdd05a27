from __future__ import annotations

# Scanned on both resume and job description text.
CORE_TECH_TERMS: tuple[str, ...] = (
    # Languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "swift",
    "kotlin", "go", "rust", "scala", "perl", "r", "matlab", "sas", "bash", "powershell",
    # Frontend
    "react", "angular", "vue", "html", "css", "scss", "sass",
    # Backend / frameworks
    "node", "nodejs", "express", "django", "flask", "spring", "hibernate",
    # Data
    "sql", "mysql", "postgresql", "mongodb", "nosql", "redis", "elasticsearch",
    "pandas", "numpy", "tensorflow", "pytorch", "machine learning", "ml", "ai",
    "data science", "tableau", "power bi", "excel",
    # Cloud / infra
    "aws", "azure", "gcp", "cloud", "docker", "kubernetes", "jenkins", "ansible",
    "terraform", "linux", "unix", "git", "devops", "ci/cd", "microservices", "serverless",
    # APIs
    "api", "restful", "graphql", "websocket",
    # Methodology / business tools
    "agile", "scrum", "jira", "confluence", "salesforce", "sap", "oracle", "word",
    # Emerging / design
    "blockchain", "iot", "ar", "vr", "unity", "unreal", "figma", "sketch",
    "photoshop", "illustrator", "xd",
)

# Job-description analysis uses this wider list.
EXTENDED_TECH_TERMS: tuple[str, ...] = (
    # Languages
    "javascript", "js", "typescript", "ts", "python", "java", "c++", "cpp", "c#", "csharp",
    "dotnet", "ruby", "rails", "php", "laravel", "swift", "kotlin", "dart", "go", "golang",
    "rust", "scala", "perl", "r", "matlab", "sas", "spss", "vba", "bash", "shell", "powershell",
    "solidity",
    # Frontend
    "react", "reactjs", "angular", "angularjs", "vue", "vuejs", "html", "html5", "css", "css3",
    "scss", "sass", "less", "redux", "mobx", "vuex", "context api", "hooks", "webpack", "babel",
    "npm", "yarn", "pnpm", "frontend", "responsive", "ui", "ux",
    # Backend / frameworks
    "node", "nodejs", "express", "expressjs", "django", "flask", "fastapi", "spring",
    "springboot", "hibernate", "maven", "gradle", "backend", "fullstack", "full stack",
    "api", "rest", "restful", "graphql", "websocket", "socket.io", "microservices",
    "serverless", "lambda", "azure functions", "oauth", "jwt",
    # Data
    "sql", "mysql", "postgresql", "mongodb", "nosql", "cassandra", "dynamodb", "couchdb",
    "neo4j", "redis", "memcached", "elasticsearch", "elk", "pandas", "numpy", "scipy",
    "tensorflow", "pytorch", "keras", "machine learning", "ml", "ai",
    "artificial intelligence", "data science", "tableau", "power bi", "looker", "excel",
    "analytics",
    # Cloud / infra
    "aws", "azure", "gcp", "google cloud", "cloud", "docker", "kubernetes", "k8s", "git",
    "github", "gitlab", "jenkins", "travis", "circleci", "ansible", "puppet", "chef",
    "terraform", "cloudformation", "linux", "unix", "ubuntu", "centos", "devops", "ci/cd",
    # Security
    "authentication", "authorization", "security", "encryption", "ssl", "tls",
    # Testing
    "testing", "jest", "mocha", "chai", "cypress", "selenium", "pytest", "junit", "tdd", "bdd",
    # Practices
    "agile", "scrum", "kanban", "design patterns", "solid", "dry", "kiss", "mvc", "mvvm",
    "functional programming", "oop", "object oriented",
    # Business tools
    "word", "powerpoint", "jira", "confluence", "trello", "asana", "slack", "teams",
    "salesforce", "dynamics", "sap", "oracle", "peoplesoft", "workday", "servicenow",
    "sharepoint",
    # Marketing
    "seo", "sem", "gtm", "tag manager", "a/b testing", "conversion",
    # Emerging / mobile / design
    "android", "ios", "flutter", "mobile", "blockchain", "ethereum", "iot", "raspberry pi",
    "arduino", "ar", "vr", "unity", "unreal", "game development", "figma", "sketch",
    "adobe xd", "photoshop", "illustrator", "after effects", "premiere",
)

SOFT_SKILL_TERMS: tuple[str, ...] = (
    "leadership",
    "communication",
    "teamwork",
    "problem solving",
    "critical thinking",
    "time management",
    "adaptability",
    "creativity",
    "collaboration",
    "organization",
    "analytical",
    "interpersonal",
    "presentation",
    "negotiation",
    "conflict resolution",
    "decision making",
    "strategic thinking",
    "project management",
    "stakeholder management",
)

# A noun phrase containing any of these words is discarded.
NOUN_STOP_WORDS: frozenset[str] = frozenset(
    {
        "with",
        "from",
        "that",
        "this",
        "have",
        "been",
        "were",
        "will",
        "would",
        "could",
        "should",
    }
)

ACTION_VERBS: tuple[str, ...] = (
    "managed",
    "led",
    "developed",
    "created",
    "implemented",
    "designed",
    "built",
    "improved",
    "achieved",
    "delivered",
    "coordinated",
    "analyzed",
    "optimized",
    "spearheaded",
    "executed",
    "established",
    "initiated",
    "launched",
    "streamlined",
    "enhanced",
    "resolved",
    "maintained",
    "supervised",
    "trained",
    "mentored",
    "collaborated",
    "facilitated",
    "negotiated",
    "increased",
    "reduced",
    "transformed",
    "automated",
    "integrated",
    "tested",
    "debugged",
    "deployed",
    "architected",
    "engineered",
    "programmed",
    "coded",
)

# The suggestion rule checks only the leading, most recognisable verbs.
LEADING_ACTION_VERBS: tuple[str, ...] = ACTION_VERBS[:16]

FIRST_PERSON_PRONOUNS: tuple[str, ...] = ("i", "me", "my", "mine")

DECORATIVE_GLYPHS = "★☆●○■□▪▫◆◇"

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec",
)
