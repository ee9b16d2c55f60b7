from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _ApiRecord(BaseModel):
    # Proxycurl adds fields over time; keep whatever it sends
    model_config = ConfigDict(extra="allow", frozen=True)


class ProfileDate(_ApiRecord):
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


class Experience(_ApiRecord):
    starts_at: Optional[ProfileDate] = None
    ends_at: Optional[ProfileDate] = None
    company: Optional[str] = None
    company_linkedin_profile_url: Optional[str] = None
    company_facebook_profile_url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None


class Education(_ApiRecord):
    starts_at: Optional[ProfileDate] = None
    ends_at: Optional[ProfileDate] = None
    field_of_study: Optional[str] = None
    degree_name: Optional[str] = None
    school: Optional[str] = None
    school_linkedin_profile_url: Optional[str] = None
    school_facebook_profile_url: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    grade: Optional[str] = None
    activities_and_societies: Optional[str] = None


class Language(_ApiRecord):
    name: Optional[str] = None
    # ELEMENTARY, LIMITED_WORKING, PROFESSIONAL_WORKING, FULL_PROFESSIONAL, NATIVE_OR_BILINGUAL
    proficiency: Optional[str] = None


class AccomplishmentOrg(_ApiRecord):
    starts_at: Optional[ProfileDate] = None
    ends_at: Optional[ProfileDate] = None
    org_name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class Publication(_ApiRecord):
    name: Optional[str] = None
    publisher: Optional[str] = None
    published_on: Optional[ProfileDate] = None
    description: Optional[str] = None
    url: Optional[str] = None


class HonourAward(_ApiRecord):
    title: Optional[str] = None
    issuer: Optional[str] = None
    issued_on: Optional[ProfileDate] = None
    description: Optional[str] = None


class Patent(_ApiRecord):
    title: Optional[str] = None
    issuer: Optional[str] = None
    issued_on: Optional[ProfileDate] = None
    description: Optional[str] = None
    application_number: Optional[str] = None
    patent_number: Optional[str] = None
    url: Optional[str] = None


class Course(_ApiRecord):
    name: Optional[str] = None
    number: Optional[str] = None


class Project(_ApiRecord):
    starts_at: Optional[ProfileDate] = None
    ends_at: Optional[ProfileDate] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


class TestScore(_ApiRecord):
    name: Optional[str] = None
    score: Optional[str] = None
    date_on: Optional[ProfileDate] = None
    description: Optional[str] = None


class VolunteeringExperience(_ApiRecord):
    starts_at: Optional[ProfileDate] = None
    ends_at: Optional[ProfileDate] = None
    title: Optional[str] = None
    cause: Optional[str] = None
    company: Optional[str] = None
    company_linkedin_profile_url: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None


class Certification(_ApiRecord):
    starts_at: Optional[ProfileDate] = None
    ends_at: Optional[ProfileDate] = None
    name: Optional[str] = None
    license_number: Optional[str] = None
    display_source: Optional[str] = None
    authority: Optional[str] = None
    url: Optional[str] = None


class PeopleAlsoViewed(_ApiRecord):
    link: Optional[str] = None
    name: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[str] = None


class Activity(_ApiRecord):
    title: Optional[str] = None
    link: Optional[str] = None
    activity_status: Optional[str] = None


class SimilarProfile(_ApiRecord):
    name: Optional[str] = None
    link: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[str] = None


class Article(_ApiRecord):
    title: Optional[str] = None
    link: Optional[str] = None
    published_date: Optional[ProfileDate] = None
    author: Optional[str] = None
    image_url: Optional[str] = None


class PersonGroup(_ApiRecord):
    profile_pic_url: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None


class InferredSalary(_ApiRecord):
    min: Optional[float] = None
    max: Optional[float] = None


class PersonExtra(_ApiRecord):
    github_profile_id: Optional[str] = None
    facebook_profile_id: Optional[str] = None
    twitter_profile_id: Optional[str] = None
    website: Optional[str] = None


class PersonProfile(_ApiRecord):
    """Person profile as returned by the Proxycurl person endpoint.

    Nulls mean "unknown / not disclosed". The add-on fields at the bottom are
    only populated when the matching enrichment flag was set to ``include``.
    """

    public_identifier: Optional[str] = None
    profile_pic_url: Optional[str] = None
    background_cover_image_url: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    follower_count: Optional[int] = None
    occupation: Optional[str] = None
    headline: Optional[str] = None
    summary: Optional[str] = None
    country: Optional[str] = None
    country_full_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    experiences: Optional[List[Experience]] = None
    education: Optional[List[Education]] = None
    languages_and_proficiencies: Optional[List[Language]] = None
    accomplishment_organisations: Optional[List[AccomplishmentOrg]] = None
    accomplishment_publications: Optional[List[Publication]] = None
    accomplishment_honors_awards: Optional[List[HonourAward]] = None
    accomplishment_patents: Optional[List[Patent]] = None
    accomplishment_courses: Optional[List[Course]] = None
    accomplishment_projects: Optional[List[Project]] = None
    accomplishment_test_scores: Optional[List[TestScore]] = None
    volunteer_work: Optional[List[VolunteeringExperience]] = None
    certifications: Optional[List[Certification]] = None
    connections: Optional[int] = None
    people_also_viewed: Optional[List[PeopleAlsoViewed]] = None
    recommendations: Optional[List[str]] = None
    activities: Optional[List[Activity]] = None
    similarly_named_profiles: Optional[List[SimilarProfile]] = None
    articles: Optional[List[Article]] = None
    groups: Optional[List[PersonGroup]] = None

    inferred_salary: Optional[InferredSalary] = None
    gender: Optional[str] = None
    birth_date: Optional[ProfileDate] = None
    industry: Optional[str] = None
    extra: Optional[PersonExtra] = None
    interests: Optional[List[str]] = None
    personal_emails: Optional[List[str]] = None
    personal_numbers: Optional[List[str]] = None
    skills: Optional[List[str]] = None
