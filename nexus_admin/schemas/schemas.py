"""
Pydantic Schemas - Request Validation

All API request bodies in one file for simplicity.

These DTOs are the only place where required fields and value ranges
are checked. Fields that the server owns (counters, analytics,
created_by, slugs) are deliberately absent, so a client can never set them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, EmailStr, Field,
    model_validator
)

from nexus_admin.models import (
    announcement, blog, enrollment, internship, job, posting, product, team, training, user
)


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store datetimes as naive UTC, the way pymongo hands them back."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(_naive_utc)]


def _choices(name: str, values: tuple) -> type:
    return Enum(name, [(v, v) for v in values], type=str)


def _future(value: Optional[datetime]) -> Optional[datetime]:
    value = _naive_utc(value)
    if value is not None and value <= datetime.utcnow():
        raise ValueError("Application deadline must be in the future")
    return value


FutureDateTime = Annotated[datetime, AfterValidator(_future)]


class Schema(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)


# ============================================================
# ENUMS
# ============================================================

UserRole = _choices("UserRole", user.ROLES)
TrainingCategory = _choices("TrainingCategory", training.CATEGORIES)
TrainingLevel = _choices("TrainingLevel", training.LEVELS)
EnrollmentStatus = _choices("EnrollmentStatus", enrollment.STATUSES)
PaymentStatus = _choices("PaymentStatus", enrollment.PAYMENT_STATUSES)
ProductCategory = _choices("ProductCategory", product.CATEGORIES)
ProductStatus = _choices("ProductStatus", product.STATUSES)
PostStatus = _choices("PostStatus", blog.STATUSES)
AnnouncementType = _choices("AnnouncementType", announcement.TYPES)
AnnouncementPriority = _choices("AnnouncementPriority", announcement.PRIORITIES)
TargetAudience = _choices("TargetAudience", announcement.AUDIENCES)
DisplayLocation = _choices("DisplayLocation", announcement.LOCATIONS)
PostingStatus = _choices("PostingStatus", posting.STATUSES)
JobCategory = _choices("JobCategory", job.CATEGORIES)
LocationType = _choices("LocationType", job.LOCATION_TYPES)
EmploymentType = _choices("EmploymentType", job.EMPLOYMENT_TYPES)
ExperienceLevel = _choices("ExperienceLevel", job.EXPERIENCE_LEVELS)
SalaryType = _choices("SalaryType", job.SALARY_TYPES)
SalaryPeriod = _choices("SalaryPeriod", job.SALARY_PERIODS)
JobApplicationStatus = _choices("JobApplicationStatus", job.APPLICATION_STATUSES)
ContactMethod = _choices("ContactMethod", job.CONTACT_METHODS)
JobInterviewType = _choices("JobInterviewType", job.INTERVIEW_TYPES)
ApplicationPriority = _choices("ApplicationPriority", job.APPLICATION_PRIORITIES)
ApplicationSource = _choices("ApplicationSource", job.APPLICATION_SOURCES)
InternshipCategory = _choices("InternshipCategory", internship.CATEGORIES)
InternshipLevel = _choices("InternshipLevel", internship.LEVELS)
StipendPeriod = _choices("StipendPeriod", internship.STIPEND_PERIODS)
ExperienceRequired = _choices("ExperienceRequired", internship.EXPERIENCE_REQUIRED)
InternshipApplicationStatus = _choices("InternshipApplicationStatus", internship.APPLICATION_STATUSES)
ApplicantExperience = _choices("ApplicantExperience", internship.APPLICANT_EXPERIENCE)
InternshipInterviewType = _choices("InternshipInterviewType", internship.INTERVIEW_TYPES)
TeamStatus = _choices("TeamStatus", team.STATUSES)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(Schema):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)

class LoginRequest(Schema):
    email: EmailStr
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    role: str


# ============================================================
# USER SCHEMAS
# ============================================================

class UserCreate(Schema):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirm_password: str
    role: UserRole = UserRole.user
    active: bool = True

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self

class UserUpdate(Schema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    active: Optional[bool] = None
    password: Optional[str] = Field(None, min_length=6)
    profile_image: Optional[str] = None

class UserFieldPatch(Schema):
    """Single-field update, e.g. toggling ``active`` from the users table."""
    field: Literal["active", "role", "name", "email"]
    value: Any


# ============================================================
# TRAINING SCHEMAS
# ============================================================

class InstructorInfo(Schema):
    name: str = Field(..., min_length=1)
    bio: Optional[str] = None
    image: Optional[str] = None

class CurriculumModule(Schema):
    module: str
    topics: List[str] = []
    duration: Optional[str] = None

class TrainingCreate(Schema):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: TrainingCategory
    level: TrainingLevel = TrainingLevel.Beginner
    duration: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    instructor: InstructorInfo
    curriculum: List[CurriculumModule] = []
    prerequisites: List[str] = []
    what_you_will_learn: List[str] = []
    features: List[str] = []
    tags: List[str] = []
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    is_popular: bool = False
    is_featured: bool = False
    active: bool = True
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    schedule: str = "Self-paced"
    certificate: bool = True
    max_capacity: Optional[int] = Field(None, ge=1)

class TrainingUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[TrainingCategory] = None
    level: Optional[TrainingLevel] = None
    duration: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    instructor: Optional[InstructorInfo] = None
    curriculum: Optional[List[CurriculumModule]] = None
    prerequisites: Optional[List[str]] = None
    what_you_will_learn: Optional[List[str]] = None
    features: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    is_popular: Optional[bool] = None
    is_featured: Optional[bool] = None
    active: Optional[bool] = None
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    schedule: Optional[str] = None
    certificate: Optional[bool] = None
    max_capacity: Optional[int] = Field(None, ge=1)


# ============================================================
# ENROLLMENT SCHEMAS
# ============================================================

class PaymentInfo(Schema):
    amount: Optional[float] = Field(None, ge=0)
    payment_method: Optional[str] = None
    payment_id: Optional[str] = None
    payment_date: Optional[UTCDateTime] = None
    status: PaymentStatus = PaymentStatus.pending

class Certificate(Schema):
    is_issued: bool = False
    issued_at: Optional[UTCDateTime] = None
    certificate_id: Optional[str] = None
    certificate_url: Optional[str] = None

class Feedback(Schema):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    submitted_at: Optional[UTCDateTime] = None

class EnrollmentCreate(Schema):
    training_id: str = Field(..., min_length=1)
    notes: Optional[str] = None
    payment_info: Optional[PaymentInfo] = None

class EnrollmentUpdate(Schema):
    status: Optional[EnrollmentStatus] = None
    progress_percentage: Optional[int] = Field(None, ge=0, le=100)
    certificate: Optional[Certificate] = None
    notes: Optional[str] = None
    payment_info: Optional[PaymentInfo] = None
    feedback: Optional[Feedback] = None

class ProgressUpdate(Schema):
    completed_modules: int = Field(..., ge=0)
    total_modules: int = Field(..., ge=0)

    @model_validator(mode="after")
    def completed_within_total(self):
        if self.completed_modules > self.total_modules:
            raise ValueError("completed_modules cannot exceed total_modules")
        return self


# ============================================================
# PRODUCT SCHEMAS
# ============================================================

class ProductImage(Schema):
    url: str
    alt: Optional[str] = None
    is_primary: bool = False

class Specification(Schema):
    name: str
    value: str

class Inventory(Schema):
    quantity: int = Field(0, ge=0)
    track_inventory: bool = False
    low_stock_threshold: int = Field(5, ge=0)

class SeoMeta(Schema):
    meta_title: Optional[str] = Field(None, max_length=60)
    meta_description: Optional[str] = Field(None, max_length=160)
    keywords: List[str] = []

class ProductCreate(Schema):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    short_description: Optional[str] = Field(None, max_length=300)
    category: ProductCategory
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    discount: float = Field(0, ge=0, le=100)
    images: List[ProductImage] = []
    features: List[str] = []
    specifications: List[Specification] = []
    tags: List[str] = []
    inventory: Inventory = Inventory()
    seo: Optional[SeoMeta] = None
    status: ProductStatus = ProductStatus.draft
    is_featured: bool = False
    is_digital: bool = True
    download_url: Optional[str] = None

class ProductUpdate(Schema):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    short_description: Optional[str] = Field(None, max_length=300)
    category: Optional[ProductCategory] = None
    price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    discount: Optional[float] = Field(None, ge=0, le=100)
    images: Optional[List[ProductImage]] = None
    features: Optional[List[str]] = None
    specifications: Optional[List[Specification]] = None
    tags: Optional[List[str]] = None
    inventory: Optional[Inventory] = None
    seo: Optional[SeoMeta] = None
    status: Optional[ProductStatus] = None
    is_featured: Optional[bool] = None
    is_digital: Optional[bool] = None
    download_url: Optional[str] = None


# ============================================================
# BLOG SCHEMAS
# ============================================================

class FeaturedImage(Schema):
    url: str
    alt: Optional[str] = None

class BlogPostCreate(Schema):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[FeaturedImage] = None
    category: Optional[str] = None
    tags: List[str] = []
    status: PostStatus = PostStatus.draft
    is_featured: bool = False
    seo: Optional[SeoMeta] = None

class BlogPostUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[FeaturedImage] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[PostStatus] = None
    is_featured: Optional[bool] = None
    seo: Optional[SeoMeta] = None

class CommentCreate(Schema):
    content: str = Field(..., min_length=1, max_length=2000)


# ============================================================
# ANNOUNCEMENT SCHEMAS
# ============================================================

class ActionButton(Schema):
    text: str
    url: str
    style: Optional[str] = "primary"
    open_in_new_tab: bool = False

class AnnouncementMedia(Schema):
    type: Literal["image", "video", "icon"] = "image"
    url: Optional[str] = None
    alt: Optional[str] = None

class AnnouncementCreate(Schema):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=1000)
    type: AnnouncementType = AnnouncementType.info
    priority: AnnouncementPriority = AnnouncementPriority.medium
    target_audience: TargetAudience = TargetAudience.all
    display_location: List[DisplayLocation] = [DisplayLocation["global"]]
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    is_active: bool = True
    is_permanent: bool = False
    dismissible: bool = True
    auto_hide: bool = False
    auto_hide_delay: int = Field(5000, ge=1000, le=30000)
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    action_button: Optional[ActionButton] = None
    media: Optional[AnnouncementMedia] = None
    tags: List[str] = []
    metadata: Dict[str, Any] = {}

    @model_validator(mode="after")
    def end_after_start(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

class AnnouncementUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1, max_length=1000)
    type: Optional[AnnouncementType] = None
    priority: Optional[AnnouncementPriority] = None
    target_audience: Optional[TargetAudience] = None
    display_location: Optional[List[DisplayLocation]] = None
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    is_active: Optional[bool] = None
    is_permanent: Optional[bool] = None
    dismissible: Optional[bool] = None
    auto_hide: Optional[bool] = None
    auto_hide_delay: Optional[int] = Field(None, ge=1000, le=30000)
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    action_button: Optional[ActionButton] = None
    media: Optional[AnnouncementMedia] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


# ============================================================
# JOB SCHEMAS
# ============================================================

class Salary(Schema):
    type: SalaryType = SalaryType.Negotiable
    min: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)
    amount: Optional[float] = Field(None, ge=0)
    period: SalaryPeriod = SalaryPeriod.Year
    currency: str = "USD"

    @model_validator(mode="after")
    def range_is_ordered(self):
        if self.min is not None and self.max is not None and self.max < self.min:
            raise ValueError("salary max must be greater than or equal to min")
        return self

class ContactInfo(Schema):
    email: EmailStr
    phone: Optional[str] = None
    website: Optional[str] = None

class CompanyInfo(Schema):
    about: Optional[str] = None
    size: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[str] = None

class JobCreate(Schema):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=5000)
    category: JobCategory
    location: str = Field(..., min_length=1)
    location_type: LocationType = LocationType["On-site"]
    employment_type: EmploymentType = EmploymentType["Full-time"]
    experience_level: ExperienceLevel = ExperienceLevel["Entry Level"]
    salary: Salary = Salary()
    application_deadline: FutureDateTime
    start_date: Optional[UTCDateTime] = None
    requirements: List[str] = []
    responsibilities: List[str] = []
    qualifications: List[str] = []
    skills: List[str] = []
    benefits: List[str] = []
    contact_info: ContactInfo
    company_info: Optional[CompanyInfo] = None
    application_process: Optional[str] = None
    featured: bool = False
    urgent: bool = False
    status: PostingStatus = PostingStatus.Active
    max_applications: Optional[int] = Field(None, ge=1)
    tags: List[str] = []

class JobUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=5000)
    category: Optional[JobCategory] = None
    location: Optional[str] = None
    location_type: Optional[LocationType] = None
    employment_type: Optional[EmploymentType] = None
    experience_level: Optional[ExperienceLevel] = None
    salary: Optional[Salary] = None
    application_deadline: Optional[FutureDateTime] = None
    start_date: Optional[UTCDateTime] = None
    requirements: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    qualifications: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    contact_info: Optional[ContactInfo] = None
    company_info: Optional[CompanyInfo] = None
    application_process: Optional[str] = None
    featured: Optional[bool] = None
    urgent: Optional[bool] = None
    status: Optional[PostingStatus] = None
    max_applications: Optional[int] = Field(None, ge=1)
    tags: Optional[List[str]] = None


class ApplicantInfo(Schema):
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    experience: Optional[str] = Field(None, max_length=2000)
    education: Optional[str] = None
    portfolio: Optional[str] = None
    expected_salary: Optional[str] = None
    available_start_date: Optional[UTCDateTime] = None
    resume: Optional[str] = None
    linkedin_profile: Optional[str] = None
    github_profile: Optional[str] = None

class JobApplicationCreate(Schema):
    applicant_info: ApplicantInfo
    cover_letter: Optional[str] = Field(None, max_length=3000)
    contact_method: ContactMethod = ContactMethod.email
    source: ApplicationSource = ApplicationSource.Website

class JobApplicationUpdate(Schema):
    status: Optional[JobApplicationStatus] = None
    priority: Optional[ApplicationPriority] = None
    tags: Optional[List[str]] = None
    offer_details: Optional[Dict[str, Any]] = None
    note: Optional[str] = Field(None, max_length=1000)

class NoteCreate(Schema):
    content: str = Field(..., min_length=1, max_length=1000)

class InterviewSchedule(Schema):
    scheduled_date: UTCDateTime
    scheduled_time: Optional[str] = None
    interview_type: JobInterviewType = JobInterviewType.Video
    interview_link: Optional[str] = None
    interviewer_name: Optional[str] = None
    interviewer_email: Optional[EmailStr] = None


# ============================================================
# INTERNSHIP SCHEMAS
# ============================================================

class Stipend(Schema):
    amount: float = Field(0, ge=0)
    currency: str = "USD"
    period: StipendPeriod = StipendPeriod.Unpaid

class InternshipCreate(Schema):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=5000)
    category: InternshipCategory
    level: InternshipLevel = InternshipLevel["Entry Level"]
    location: str = Field(..., min_length=1)
    location_type: LocationType = LocationType["On-site"]
    duration: str = Field(..., min_length=1)
    stipend: Stipend = Stipend()
    application_deadline: FutureDateTime
    start_date: Optional[UTCDateTime] = None
    requirements: List[str] = []
    responsibilities: List[str] = []
    skills_required: List[str] = []
    experience_required: ExperienceRequired = ExperienceRequired["None"]
    benefits: List[str] = []
    company_info: Optional[CompanyInfo] = None
    contact_info: Optional[ContactInfo] = None
    featured: bool = False
    urgent: bool = False
    status: PostingStatus = PostingStatus.Active
    max_applications: Optional[int] = Field(None, ge=1)
    tags: List[str] = []

class InternshipUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=5000)
    category: Optional[InternshipCategory] = None
    level: Optional[InternshipLevel] = None
    location: Optional[str] = None
    location_type: Optional[LocationType] = None
    duration: Optional[str] = None
    stipend: Optional[Stipend] = None
    application_deadline: Optional[FutureDateTime] = None
    start_date: Optional[UTCDateTime] = None
    requirements: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    skills_required: Optional[List[str]] = None
    experience_required: Optional[ExperienceRequired] = None
    benefits: Optional[List[str]] = None
    company_info: Optional[CompanyInfo] = None
    contact_info: Optional[ContactInfo] = None
    featured: Optional[bool] = None
    urgent: Optional[bool] = None
    status: Optional[PostingStatus] = None
    max_applications: Optional[int] = Field(None, ge=1)
    tags: Optional[List[str]] = None


class Education(Schema):
    degree: Optional[str] = None
    institution: Optional[str] = None
    graduation_year: Optional[int] = Field(None, ge=1950, le=2100)
    gpa: Optional[float] = Field(None, ge=0, le=4)

class Availability(Schema):
    start_date: Optional[UTCDateTime] = None
    duration: Optional[str] = None
    hours_per_week: Optional[int] = Field(None, ge=1, le=40)

class Reference(Schema):
    name: str
    position: Optional[str] = None
    company: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None

class InternshipApplicationCreate(Schema):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    current_position: Optional[str] = None
    company: Optional[str] = None
    experience: ApplicantExperience = ApplicantExperience["No Experience"]
    education: Optional[Education] = None
    skills: List[str] = []
    cover_letter: Optional[str] = Field(None, max_length=2000)
    motivation: Optional[str] = Field(None, max_length=1000)
    availability: Optional[Availability] = None
    resume: Optional[str] = None
    portfolio: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    references: List[Reference] = []
    source: str = "Website"

class InternshipApplicationUpdate(Schema):
    status: Optional[InternshipApplicationStatus] = None
    note: Optional[str] = Field(None, max_length=500)

class AdminNoteCreate(Schema):
    note: str = Field(..., min_length=1, max_length=500)

class InternshipInterviewSchedule(Schema):
    date: UTCDateTime
    time: Optional[str] = None
    type: InternshipInterviewType = InternshipInterviewType.Video
    meeting_link: Optional[str] = None
    notes: Optional[str] = None


# ============================================================
# TEAM SCHEMAS
# ============================================================

class TeamMemberCreate(Schema):
    name: str = Field(..., min_length=1, max_length=100)
    position: str = Field(..., min_length=1, max_length=100)
    department: str = Field(..., min_length=1)
    bio: Optional[str] = Field(None, max_length=1000)
    image: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    expertise: List[str] = []
    experience: Optional[str] = None
    education: Optional[str] = None
    achievements: List[str] = []
    is_ceo: bool = False
    is_founder: bool = False
    is_featured: bool = False
    join_date: Optional[UTCDateTime] = None
    status: TeamStatus = TeamStatus.active
    display_order: int = 0
    social_links: Dict[str, str] = {}

class TeamMemberUpdate(Schema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    position: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=1000)
    image: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    expertise: Optional[List[str]] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    achievements: Optional[List[str]] = None
    is_ceo: Optional[bool] = None
    is_founder: Optional[bool] = None
    is_featured: Optional[bool] = None
    join_date: Optional[UTCDateTime] = None
    status: Optional[TeamStatus] = None
    display_order: Optional[int] = None
    social_links: Optional[Dict[str, str]] = None


# ============================================================
# SETTINGS / CONTENT / SEO SCHEMAS
# ============================================================

class SiteSettingsUpdate(Schema):
    """Shallow update; omitted keys keep their stored value."""
    site_name: Optional[str] = None
    site_description: Optional[str] = None
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    social_media: Optional[Dict[str, Optional[str]]] = None
    seo: Optional[Dict[str, Any]] = None
    features: Optional[Dict[str, bool]] = None

class ContentSave(Schema):
    """Either one ``section`` with its ``content``, or a full ``{section: content}`` map."""
    section: Optional[str] = Field(None, min_length=1)
    content: Dict[str, Any]

class SeoSettingsUpdate(Schema):
    meta: Optional[Dict[str, Any]] = None
    analytics: Optional[Dict[str, Any]] = None
    sitemap: Optional[Dict[str, Any]] = None
    robots: Optional[Dict[str, Any]] = None
    structured_data: Optional[Dict[str, Any]] = None


# ============================================================
# GENERIC
# ============================================================

class MessageResponse(BaseModel):
    success: bool = True
    message: str
