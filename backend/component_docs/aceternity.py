"""Aceternity UI components: animated, effect-heavy building blocks."""

from models import ComponentDoc

ACETERNITY_DOCS: list[ComponentDoc] = [
    ComponentDoc(
        name="BackgroundBeams",
        import_docs='import { BackgroundBeams } from "/components/ui/background-beams"',
        usage_docs="""<div className="relative h-96 w-full rounded-md bg-neutral-950 flex items-center justify-center">
  <h2 className="relative z-10 text-4xl font-bold text-white">Join the waitlist</h2>
  <BackgroundBeams />
</div>""",
    ),
    ComponentDoc(
        name="CardContainer",
        import_docs='import { CardBody, CardContainer, CardItem } from "/components/ui/3d-card"',
        usage_docs="""<CardContainer className="inter-var">
  <CardBody className="relative w-auto rounded-xl border border-black/10 bg-gray-50 p-6">
    <CardItem translateZ="50" className="text-xl font-bold text-neutral-600">
      Make things float in air
    </CardItem>
    <CardItem translateZ="100" className="mt-4 w-full">
      <div className="bg-gray-200 border-2 border-dashed rounded-xl w-16 h-16" />
    </CardItem>
  </CardBody>
</CardContainer>""",
    ),
    ComponentDoc(
        name="HoverEffect",
        import_docs='import { HoverEffect } from "/components/ui/card-hover-effect"',
        usage_docs="""const projects = [
  { title: "Stripe", description: "Online payment processing.", link: "https://stripe.com" },
  { title: "Netflix", description: "Streaming service for shows and movies.", link: "https://netflix.com" },
];

<HoverEffect items={projects} />""",
    ),
    ComponentDoc(
        name="MovingBorder",
        import_docs='import { Button } from "/components/ui/moving-border"',
        usage_docs="""<Button borderRadius="1.75rem" className="bg-white text-black border-neutral-200">
  Borders are cool
</Button>""",
    ),
    ComponentDoc(
        name="SparklesCore",
        import_docs='import { SparklesCore } from "/components/ui/sparkles"',
        usage_docs="""<SparklesCore
  background="transparent"
  minSize={0.4}
  maxSize={1}
  particleDensity={1200}
  className="w-full h-full"
  particleColor="#FFFFFF"
/>""",
    ),
    ComponentDoc(
        name="Spotlight",
        import_docs='import { Spotlight } from "/components/ui/spotlight"',
        usage_docs="""<div className="relative h-96 w-full overflow-hidden rounded-md bg-black/95">
  <Spotlight className="-top-40 left-0" fill="white" />
  <h1 className="text-4xl font-bold text-neutral-50">Spotlight is the new trend.</h1>
</div>""",
    ),
    ComponentDoc(
        name="TextGenerateEffect",
        import_docs='import { TextGenerateEffect } from "/components/ui/text-generate-effect"',
        usage_docs='<TextGenerateEffect words="Oxygen gets you high. In a catastrophic emergency, we\'re taking giant, panicked breaths." />',
    ),
    ComponentDoc(
        name="TypewriterEffect",
        import_docs='import { TypewriterEffect } from "/components/ui/typewriter-effect"',
        usage_docs="""const words = [
  { text: "Build" },
  { text: "awesome" },
  { text: "apps", className: "text-blue-500" },
];

<TypewriterEffect words={words} />""",
    ),
]
