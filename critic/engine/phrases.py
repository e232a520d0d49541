"""Canned UX critique phrases, grouped by category.

Each category carries three rhetorical flavours of feedback: plain design
critique, business-metrics wording for stakeholders, and WCAG-referenced
wording for accessibility reviews. The flavour is not stored; it is
recovered from the wording by :mod:`critic.engine.styles`.
"""

from critic.models.feedback import FeedbackPhrase

PHRASES: tuple[FeedbackPhrase, ...] = (
    # usability
    FeedbackPhrase(
        text="The button text is clear and action-oriented, making the primary action obvious to users.",
        category="usability",
        type="positive",
    ),
    FeedbackPhrase(
        text="The call-to-action button lacks sufficient visual hierarchy and may be overlooked.",
        category="usability",
        type="issue",
        suggestion="Consider using a contrasting color and larger size to draw attention to the primary action.",
    ),
    FeedbackPhrase(
        text="Information density is well-balanced—not overwhelming, allowing users to scan content easily.",
        category="usability",
        type="positive",
    ),
    FeedbackPhrase(
        text="The layout feels cluttered with too many elements competing for attention.",
        category="usability",
        type="issue",
        suggestion=(
            "Apply the 80/20 rule: highlight the most important 20% of content "
            "and de-emphasize the rest using whitespace."
        ),
    ),
    FeedbackPhrase(
        text="Progressive disclosure is implemented effectively—showing only essential information upfront.",
        category="usability",
        type="positive",
    ),
    FeedbackPhrase(
        text="Critical information is buried below the fold, requiring unnecessary scrolling.",
        category="usability",
        type="issue",
        suggestion="Move key actions and value propositions above the fold for better visibility.",
    ),
    FeedbackPhrase(
        text=(
            "The primary call-to-action sits where users expect it, which typically supports "
            "higher conversion on landing pages."
        ),
        category="usability",
        type="positive",
    ),
    FeedbackPhrase(
        text="Competing actions on the first screen dilute the main conversion path.",
        category="usability",
        type="issue",
        suggestion=(
            "Keep one primary CTA per view; teams commonly see a 10-15% lift in "
            "click-through after removing secondary buttons."
        ),
    ),
    FeedbackPhrase(
        text=(
            "There is no visible measure of task success, so the team cannot track "
            "completion rate for the core flow."
        ),
        category="usability",
        type="issue",
        suggestion="Instrument the main task with analytics events and agree on baseline metrics before launch.",
    ),
    FeedbackPhrase(
        text="Interactive controls may not show a visible focus indicator when reached by keyboard.",
        category="usability",
        type="issue",
        suggestion="Meet WCAG 2.2 SC 2.4.7 (Focus Visible) with a clearly styled focus ring on every control.",
    ),
    FeedbackPhrase(
        text="Time-limited steps could block users who need more time to read or respond.",
        category="usability",
        type="issue",
        suggestion="Follow WCAG SC 2.2.1 (Timing Adjustable): let users extend, adjust, or turn off limits.",
    ),
    FeedbackPhrase(
        text="Instructions appear before the controls they describe, satisfying WCAG SC 3.3.2 (Labels or Instructions).",
        category="usability",
        type="positive",
    ),
    # hierarchy
    FeedbackPhrase(
        text="Visual hierarchy is clear—headings, body text, and actions are well-distinguished.",
        category="hierarchy",
        type="positive",
    ),
    FeedbackPhrase(
        text="Typography hierarchy is weak; heading sizes don't create clear distinction between levels.",
        category="hierarchy",
        type="issue",
        suggestion="Establish a clear type scale with at least 2:1 ratio between heading levels for better scanning.",
    ),
    FeedbackPhrase(
        text="Color and spacing effectively guide the eye to important elements in the correct order.",
        category="hierarchy",
        type="positive",
    ),
    FeedbackPhrase(
        text="Multiple elements have equal visual weight, making it unclear where users should focus first.",
        category="hierarchy",
        type="issue",
        suggestion=(
            "Use size, contrast, and positioning to create a clear focal point—"
            "the Z-pattern or F-pattern reading flow."
        ),
    ),
    FeedbackPhrase(
        text=(
            "The wireframe demonstrates strong information architecture with logical "
            "grouping of related elements."
        ),
        category="hierarchy",
        type="positive",
    ),
    FeedbackPhrase(
        text="Related content is scattered across the layout, breaking mental models of grouping.",
        category="hierarchy",
        type="issue",
        suggestion=(
            "Group related elements using visual proximity (closer spacing) and "
            "containers to improve cognitive load."
        ),
    ),
    FeedbackPhrase(
        text=(
            "The headline states the value clearly, which helps retention of first-time "
            "visitors beyond the first screen."
        ),
        category="hierarchy",
        type="positive",
    ),
    FeedbackPhrase(
        text="Key value props are pushed below secondary content, which tends to raise bounce on entry pages.",
        category="hierarchy",
        type="issue",
        suggestion="Lead with the top two value props and measure exit rate on the page before and after the change.",
    ),
    FeedbackPhrase(
        text=(
            "Headings appear to be styled text rather than structural headings, so "
            "assistive tech cannot convey the page outline."
        ),
        category="hierarchy",
        type="issue",
        suggestion="Use real heading levels to satisfy WCAG SC 1.3.1 (Info and Relationships).",
    ),
    FeedbackPhrase(
        text="Reading order follows the visual layout, which supports a logical focus order (WCAG SC 2.4.3).",
        category="hierarchy",
        type="positive",
    ),
    FeedbackPhrase(
        text="Content laid out in fixed-width columns may not reflow at 400% zoom.",
        category="hierarchy",
        type="issue",
        suggestion="Meet WCAG SC 1.4.10 (Reflow) by stacking columns at narrow widths.",
    ),
    # accessibility
    FeedbackPhrase(
        text="Form fields have clear labels positioned appropriately for screen reader users.",
        category="accessibility",
        type="positive",
    ),
    FeedbackPhrase(
        text="Color is used as the sole indicator of important information, which fails accessibility standards.",
        category="accessibility",
        type="issue",
        suggestion="Combine color with text labels, icons, or patterns to ensure information is perceivable by all users.",
    ),
    FeedbackPhrase(
        text="Interactive elements appear large enough for easy tapping and have adequate spacing.",
        category="accessibility",
        type="positive",
    ),
    FeedbackPhrase(
        text="Text contrast may be insufficient for users with low vision; dark gray on light gray is problematic.",
        category="accessibility",
        type="issue",
        suggestion="Ensure text meets WCAG AA standards: 4.5:1 contrast ratio for normal text, 3:1 for large text.",
    ),
    FeedbackPhrase(
        text="The wireframe considers keyboard navigation with a logical tab order.",
        category="accessibility",
        type="positive",
    ),
    FeedbackPhrase(
        text=(
            "Low-legibility text risks excluding a segment of customers, which directly "
            "affects conversion and brand reach."
        ),
        category="accessibility",
        type="issue",
        suggestion="Treat readable text as a business requirement and track support tickets and drop off linked to it.",
    ),
    FeedbackPhrase(
        text="Inclusive patterns here widen the addressable audience, supporting long-term retention.",
        category="accessibility",
        type="positive",
    ),
    FeedbackPhrase(
        text="Status is conveyed by color alone in several places.",
        category="accessibility",
        type="issue",
        suggestion="Address WCAG SC 1.4.1 (Use of Color) by pairing color with text or icons.",
    ),
    FeedbackPhrase(
        text="Placeholder text appears to stand in for field labels.",
        category="accessibility",
        type="issue",
        suggestion="Provide persistent visible labels per WCAG SC 3.3.2 (Labels or Instructions).",
    ),
    FeedbackPhrase(
        text="Icon buttons appear to have room for text alternatives, in line with WCAG SC 1.1.1 (Non-text Content).",
        category="accessibility",
        type="positive",
    ),
    # navigation
    FeedbackPhrase(
        text="Navigation placement is intuitive and follows common web conventions.",
        category="navigation",
        type="positive",
    ),
    FeedbackPhrase(
        text=(
            "The navigation structure is unclear—users may struggle to understand "
            "their location and next steps."
        ),
        category="navigation",
        type="issue",
        suggestion=(
            "Consider adding breadcrumbs, clear section labels, or a 'You are here' "
            "indicator to improve wayfinding."
        ),
    ),
    FeedbackPhrase(
        text="Primary navigation items are concise and use language familiar to the target audience.",
        category="navigation",
        type="positive",
    ),
    FeedbackPhrase(
        text="Too many navigation options create decision paralysis—the paradox of choice.",
        category="navigation",
        type="issue",
        suggestion="Limit top-level navigation to 5-7 items. Group secondary options in a clear menu hierarchy.",
    ),
    FeedbackPhrase(
        text="The back button and exit paths are clearly defined, supporting user exploration.",
        category="navigation",
        type="positive",
    ),
    FeedbackPhrase(
        text="Unclear navigation labels are a common cause of drop off before users reach key pages.",
        category="navigation",
        type="issue",
        suggestion="Run a tree test and compare exit rate on the top three entry pages against industry avg.",
    ),
    FeedbackPhrase(
        text="Navigation surfaces revenue-driving sections first, shortening the path into the purchase funnel.",
        category="navigation",
        type="positive",
    ),
    FeedbackPhrase(
        text="Secondary links in the header pull attention away from the main conversion path.",
        category="navigation",
        type="issue",
        suggestion="Move low-value links to the footer and monitor clicks on the primary path.",
    ),
    FeedbackPhrase(
        text="There is no skip link, so keyboard users must tab through the full header on every page.",
        category="navigation",
        type="issue",
        suggestion="Add a 'Skip to main content' link to satisfy WCAG SC 2.4.1 (Bypass Blocks).",
    ),
    FeedbackPhrase(
        text="Menu items follow a predictable focus order from left to right.",
        category="navigation",
        type="positive",
    ),
    FeedbackPhrase(
        text="The dropdown menu may only open on hover, leaving keyboard and touch users without access.",
        category="navigation",
        type="issue",
        suggestion="Make menus operable by keyboard per WCAG SC 2.1.1 (Keyboard).",
    ),
    # form
    FeedbackPhrase(
        text="Form fields are organized logically with related inputs grouped together.",
        category="form",
        type="positive",
    ),
    FeedbackPhrase(
        text="Required fields are not clearly marked, which may lead to form submission errors.",
        category="form",
        type="issue",
        suggestion="Use asterisks (*) or 'required' labels, and consider inline validation for better user feedback.",
    ),
    FeedbackPhrase(
        text="The form uses appropriate input types (email, password) which improves mobile UX and validation.",
        category="form",
        type="positive",
    ),
    FeedbackPhrase(
        text="Error states are not considered—users won't know what went wrong if validation fails.",
        category="form",
        type="issue",
        suggestion="Design error messages that are specific, actionable, and placed near the relevant field.",
    ),
    FeedbackPhrase(
        text="The form length is reasonable; breaking multi-step forms into stages would reduce abandonment.",
        category="form",
        type="issue",
        suggestion="If the form has more than 5-7 fields, consider a multi-step wizard with progress indicators.",
    ),
    FeedbackPhrase(
        text="Every extra required field adds friction; long sign-up forms are a leading cause of abandonment.",
        category="form",
        type="issue",
        suggestion="Cut optional fields; removing even two fields often yields a 5-10% lift in completion rate.",
    ),
    FeedbackPhrase(
        text="Inline validation on the form should lower abandonment and reduce support costs.",
        category="form",
        type="positive",
    ),
    FeedbackPhrase(
        text="The form gives no reason why personal data is requested, which hurts completion rate and trust.",
        category="form",
        type="issue",
        suggestion="Add short helper text explaining the benefit and measure completion rate per field.",
    ),
    FeedbackPhrase(
        text="Error messages may rely on red borders alone.",
        category="form",
        type="issue",
        suggestion="Identify errors in text per WCAG SC 3.3.1 (Error Identification) and avoid relying on use of color.",
    ),
    FeedbackPhrase(
        text="Each input has an associated label, meeting WCAG SC 1.3.1 (Info and Relationships).",
        category="form",
        type="positive",
    ),
    FeedbackPhrase(
        text="Related radio buttons are not grouped, so screen readers cannot announce the question they answer.",
        category="form",
        type="issue",
        suggestion="Wrap the group in a fieldset with a legend (WCAG SC 1.3.1).",
    ),
    # mobile
    FeedbackPhrase(
        text="The layout adapts well to smaller screens with appropriate touch target sizes (minimum 44x44px).",
        category="mobile",
        type="positive",
    ),
    FeedbackPhrase(
        text="Text appears too small on mobile devices and may require pinch-to-zoom, harming usability.",
        category="mobile",
        type="issue",
        suggestion="Ensure body text is at least 16px on mobile to prevent automatic zooming and improve readability.",
    ),
    FeedbackPhrase(
        text="The mobile layout prioritizes content effectively, hiding less critical elements.",
        category="mobile",
        type="positive",
    ),
    FeedbackPhrase(
        text="Horizontal scrolling is required, which breaks mobile UX patterns and frustrates users.",
        category="mobile",
        type="issue",
        suggestion="Ensure all content fits within the viewport width. Use responsive breakpoints and flexible layouts.",
    ),
    FeedbackPhrase(
        text="Thumb-friendly navigation placement makes the interface easy to use one-handed.",
        category="mobile",
        type="positive",
    ),
    FeedbackPhrase(
        text="Images and media may not be optimized for mobile data consumption and slow connections.",
        category="mobile",
        type="issue",
        suggestion="Consider lazy loading, responsive images, and providing low-bandwidth alternatives.",
    ),
    FeedbackPhrase(
        text=(
            "Most traffic for products like this is mobile, so any friction here has an "
            "outsized effect on conversion."
        ),
        category="mobile",
        type="issue",
        suggestion="Prioritize the mobile flow and compare results against viewport benchmarks for your audience.",
    ),
    FeedbackPhrase(
        text="The mobile layout keeps the primary action within reach, which supports checkout conversion.",
        category="mobile",
        type="positive",
    ),
    FeedbackPhrase(
        text="Slow-loading media on mobile raises bounce before users see the offer.",
        category="mobile",
        type="issue",
        suggestion="Set a performance budget; each second saved typically drives a 7% lift in retained sessions.",
    ),
    FeedbackPhrase(
        text="Small tap targets sit close together, risking mis-taps.",
        category="mobile",
        type="issue",
        suggestion="Meet WCAG 2.2 SC 2.5.8 (Target Size, Minimum): at least 24x24 CSS px with spacing.",
    ),
    FeedbackPhrase(
        text="The layout may lock to portrait orientation.",
        category="mobile",
        type="issue",
        suggestion="Support both orientations per WCAG SC 1.3.4 (Orientation).",
    ),
    FeedbackPhrase(
        text="Text may get cut off when users increase font size on mobile.",
        category="mobile",
        type="issue",
        suggestion="Check WCAG SC 1.4.4 (Resize Text) and SC 1.4.10 (Reflow) at 200% zoom.",
    ),
)
